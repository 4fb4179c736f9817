"""Attach conversion chains and Excel type keys to function models."""

from __future__ import annotations

from collections.abc import Iterable

from xlwgen.errors import GeneratorError
from xlwgen.function_model import FunctionModel
from xlwgen.parser_data import FunctionArgument, FunctionArgumentType, FunctionDescription
from xlwgen.registry import TypeRegistry


def check_and_get_type(registry: TypeRegistry, class_name: str) -> tuple[str, list[str]]:
    """Return the Excel key and the conversion chain of a type.

    The key is taken from the first link of the chain that has one. A chain
    that reaches a base type belonging to a parent registry has no key, and
    an empty key is returned for it.
    """
    chain = registry.get_chain(class_name)
    last = len(chain) - 1
    key = ""
    for index, link in enumerate(chain):
        if key:
            break
        if not registry.is_type_registered(link):
            if registry.is_of_base_type(link):
                if index != last:
                    raise GeneratorError(
                        f"chain for {class_name} not terminating with parent type {link}"
                    )
                return "", chain
            raise GeneratorError(f"Unknown type {link}")
        key = registry.get_registration(link).excel_key

    if not key:
        raise GeneratorError(f"excel key not given  {class_name}")
    return key, chain


def _typed_argument(registry: TypeRegistry, type_name: str, name: str, description: str) -> FunctionArgument:
    key, chain = check_and_get_type(registry, type_name)
    return FunctionArgument(FunctionArgumentType(type_name, chain, key), name, description)


def function_typer(
    models: Iterable[FunctionModel], registry: TypeRegistry
) -> list[FunctionDescription]:
    """Turn untyped function models into typed descriptions."""
    descriptions: list[FunctionDescription] = []
    for model in models:
        key, _ = check_and_get_type(registry, model.return_type)
        arguments = [
            _typed_argument(registry, arg.type, arg.name, arg.description)
            for arg in model.arguments
        ]
        descriptions.append(
            FunctionDescription(
                model.name,
                model.description,
                model.return_type,
                key,
                arguments,
                volatile=model.volatile,
                time=model.time,
                threadsafe=model.threadsafe,
                help_id=model.help_id,
                asynchronous=model.asynchronous,
                macro_sheet=model.macro_sheet,
                cluster_safe=model.cluster_safe,
            )
        )
    return descriptions