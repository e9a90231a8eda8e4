"""Type membership checks."""
from __future__ import annotations

import builtins
import importlib
import types
from typing import Any

import typeguard

from .exceptions import InstanceOfError


def check_type(obj: Any, cls: Any) -> bool:
    """Type checking that works better for type generics"""
    result = True
    try:
        typeguard.check_type(obj, cls)
    except typeguard.TypeCheckError:
        result = False
    return result


def _is_type_construct(cls: Any) -> bool:
    # `list[int]`, `Literal[...]`, `int | None` and special forms such as `Any`
    # can not be used with `isinstance`
    return (
        hasattr(cls, "__origin__")
        or isinstance(cls, types.UnionType)
        or getattr(cls, "__module__", None) in ("typing", "typing_extensions")
    )


def locate_class(path: str) -> Any:
    """
    Resolves a class from its name. Dotted paths (``"collections.OrderedDict"``)
    are imported, bare names (``"int"``) are looked up in builtins.

    :raises TypeError: if ``path`` does not name a class.
    """
    module_name, _, name = path.rpartition(".")
    try:
        if module_name:
            result = getattr(importlib.import_module(module_name), name)
        else:
            result = getattr(builtins, name)
    except (ImportError, AttributeError):
        raise TypeError(f"Unable to resolve class '{path}'") from None

    if not (isinstance(result, type) or _is_type_construct(result)):
        raise TypeError(f"'{path}' does not name a class")
    return result


def _to_class(entry: Any) -> Any:
    if isinstance(entry, str):
        return locate_class(entry)
    if isinstance(entry, type) or _is_type_construct(entry):
        return entry
    return type(entry)


def _get_type_name(cls: Any) -> str:
    if _is_type_construct(cls):
        return repr(cls).replace("typing.", "")
    return cls.__qualname__


def instance_of(value: Any, instances: Any, throw_exception: bool = True) -> bool:
    """
    Checks whether ``value`` is an instance of any entry of ``instances``.

    :param value: The value to check.
    :param instances: A class, a class name (``"int"``, ``"package.module.Class"``),
        a typing construct (e.g. ``list[int]``, ``Any``), an object (whose class is
        used), or a list/tuple of any of these.
    :param throw_exception: Whether to raise instead of returning ``False``.
    :raises InstanceOfError: if no entry matches and ``throw_exception`` is set.
    :raises TypeError: if a class name can not be resolved.
    :return: ``True`` if any entry matches.
    """
    if isinstance(instances, (list, tuple)):
        candidates = list(instances)
    else:
        candidates = [instances]

    classes = [_to_class(e) for e in candidates]

    for cls in classes:
        if _is_type_construct(cls):
            if check_type(value, cls):
                return True
        elif isinstance(value, cls):
            return True

    if throw_exception:
        raise InstanceOfError([_get_type_name(cls) for cls in classes])
    return False
