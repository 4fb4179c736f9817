"""The standard set of argument types known to the generator."""

from __future__ import annotations

from xlwgen.registry import (
    MANAGED_BASE_TYPES,
    NATIVE_BASE_TYPES,
    TypeRegistration,
    TypeRegistry,
)

_NATIVE_TYPES = (
    # fundamental types
    TypeRegistration("void", "void", "", False, False, "#ERR"),
    TypeRegistration("XlfOper", "LPXLFOPER", "", False, False, "XLF_OPER"),
    TypeRegistration("double", "double", "", False, False, "B"),
    TypeRegistration(
        "NEMatrix", "LPXLARRAY", "GetMatrix", False, False, "XLW_FP", "<xlw/xlarray.h>"
    ),
    TypeRegistration("short", "XlfOper", "AsShort", True, True, "XLF_OPER"),
    TypeRegistration("MyArray", "XlfOper", "AsArray", True, True, "XLF_OPER"),
    TypeRegistration("MyMatrix", "XlfOper", "AsMatrix", True, True, "XLF_OPER"),
    TypeRegistration("CellMatrix", "XlfOper", "AsCellMatrix", True, True, "XLF_OPER"),
    TypeRegistration("string", "XlfOper", "AsString", True, True, "XLF_OPER"),
    TypeRegistration("std::string", "XlfOper", "AsString", True, True, "XLF_OPER"),
    TypeRegistration("bool", "XlfOper", "AsBool", True, True, "XLF_OPER"),
    # passed as a reference-capable XLOPER rather than a plain OPER
    TypeRegistration("reftest", "LPXLFOPER", "", False, False, "XLF_XLOPER"),
    # extended types
    TypeRegistration(
        "unsigned long", "double", "static_cast<unsigned long>", False, False
    ),
    TypeRegistration("int", "double", "static_cast<int>", False, False),
    TypeRegistration("std::wstring", "XlfOper", "AsWstring", True, True, "XLF_OPER"),
    TypeRegistration("DoubleOrNothing", "CellMatrix", "DoubleOrNothing", False, True),
    TypeRegistration(
        "ArgumentList", "CellMatrix", "ArgumentList", False, True, "", "<xlw/ArgList.h>"
    ),
)

# The include file of a managed type is the namespace it is used from.
_MANAGED_TYPES = (
    TypeRegistration(
        "DateTime", "double", "DateTime::FromOADate", False, False, "", "System"
    ),
)


def native_registry() -> TypeRegistry:
    """A fresh registry of the native types."""
    registry = TypeRegistry(NATIVE_BASE_TYPES)
    for registration in _NATIVE_TYPES:
        registry.register(registration)
    return registry


def managed_registry(native: TypeRegistry) -> TypeRegistry:
    """A fresh registry of the managed types, layered over a native registry."""
    registry = TypeRegistry(MANAGED_BASE_TYPES, parent=native)
    for registration in _MANAGED_TYPES:
        registry.register(registration)
    return registry


def default_registries() -> tuple[TypeRegistry, TypeRegistry]:
    """A fresh native registry and the managed registry built on it."""
    native = native_registry()
    return native, managed_registry(native)