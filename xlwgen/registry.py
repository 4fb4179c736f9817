"""Registries of known argument types and the include files they need."""

from __future__ import annotations

from dataclasses import dataclass

from xlwgen.errors import GeneratorError

NATIVE_BASE_TYPES = frozenset({"LPXLFOPER", "double", "LPXLARRAY", "void"})
MANAGED_BASE_TYPES = frozenset({"std::string", "CellMatrix"})

_MAX_CHAIN_DEPTH = 26


class IncludeRegistry:
    """Tracks which include files are needed by the types actually used."""

    def __init__(self) -> None:
        self._arg_include: dict[str, str] = {}
        self._arg_used: dict[str, bool] = {}

    def register(self, arg: str, include: str) -> None:
        """Record that a type needs an include; an empty include is ignored."""
        if not include:
            return
        self._arg_include.setdefault(arg, include)
        self._arg_used.setdefault(arg, False)

    def use_arg(self, arg: str) -> None:
        """Mark a type as used, if it has an include registered."""
        if arg in self._arg_used:
            self._arg_used[arg] = True

    def get_includes(self) -> list[str]:
        """Sorted, unique includes of all used types."""
        return sorted({self._arg_include[arg] for arg, used in self._arg_used.items() if used})


@dataclass(frozen=True)
class TypeRegistration:
    """How a type is converted from an older type."""

    new_type: str
    old_type: str
    converter: str
    is_method: bool
    takes_identifier: bool
    excel_key: str = ""
    include_file: str = ""
    managed_namespace: str = ""


class TypeRegistry:
    """Known types and the chains that convert each down to a base type.

    A registry may have a parent: types registered in the parent count as base
    types here, and may be used directly with a one-element chain.
    """

    def __init__(
        self,
        base_types: frozenset[str] | set[str] = frozenset(),
        parent: TypeRegistry | None = None,
    ) -> None:
        self.base_types = frozenset(base_types)
        self.parent = parent
        self.includes = IncludeRegistry()
        self._registrations: dict[str, TypeRegistration] = {}
        self._chains: dict[str, list[str]] = {}
        self._lists_built = False

    @property
    def registrations(self) -> dict[str, TypeRegistration]:
        return dict(self._registrations)

    def register(self, registration: TypeRegistration) -> None:
        """Add a registration; an existing one for the same type is kept."""
        self._registrations.setdefault(registration.new_type, registration)

    def add(
        self,
        new_type: str,
        old_type: str,
        converter: str,
        is_method: bool,
        takes_identifier: bool,
        excel_key: str = "",
        include_file: str = "",
        managed_namespace: str = "",
    ) -> None:
        """Build a registration from its parts and register it."""
        self.register(
            TypeRegistration(
                new_type,
                old_type,
                converter,
                is_method,
                takes_identifier,
                excel_key,
                include_file,
                managed_namespace,
            )
        )

    def get_registration(self, key: str) -> TypeRegistration:
        try:
            return self._registrations[key]
        except KeyError:
            raise GeneratorError(f"unknown type {key}") from None

    def is_type_registered(self, name: str) -> bool:
        return name in self._registrations

    def is_of_base_type(self, name: str) -> bool:
        if name in self.base_types:
            return True
        return self.parent is not None and self.parent.is_type_registered(name)

    def build_lists(self) -> None:
        """Work out the conversion chain of every registered type, once."""
        if self._lists_built:
            return
        for key in sorted(self._registrations):
            registration = self._registrations[key]
            self.includes.register(registration.new_type, registration.include_file)
            chain = [registration.new_type]
            while not self.is_of_base_type(chain[-1]):
                step = self._registrations.get(chain[-1])
                if step is None:
                    raise GeneratorError(f"broken chain {chain[-1]} {key}")
                chain.append(step.old_type)
                if len(chain) - 1 >= _MAX_CHAIN_DEPTH:
                    raise GeneratorError("26 deep type conversions suggests recursive loop")
            self._chains.setdefault(key, chain)
        self._lists_built = True

    def get_chain(self, name: str) -> list[str]:
        """The conversion chain of a type, from the type itself down to its base."""
        self.build_lists()
        chain = self._chains.get(name)
        if chain is None:
            if self.parent is None or not self.parent.is_type_registered(name):
                raise GeneratorError(f" bad type {name}")
            chain = [name]
            self._chains[name] = chain
            return list(chain)
        for link in chain:
            self.includes.use_arg(link)
        return list(chain)