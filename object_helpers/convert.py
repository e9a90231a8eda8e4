"""Converting objects to plain mappings."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

import attrs


def _get_slot_names(cls: type) -> list[str]:
    result: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in result:
                result.append(name)
    return result


def to_dict(obj: Any) -> dict[str, Any]:
    """
    Converts an object to a new ``dict`` of its attributes. The conversion is
    shallow: attribute values are not converted.

    :param obj: attrs instance, dataclass instance, mapping, or any object with
        a ``__dict__`` and/or ``__slots__``.
    :raises TypeError: if ``obj`` carries no attributes to convert.
    """
    if isinstance(obj, type):
        raise TypeError(f"Expected an instance, got class '{obj.__qualname__}'")
    if attrs.has(type(obj)):
        return attrs.asdict(obj, recurse=False)
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return dict(obj)

    slot_names = _get_slot_names(type(obj))
    if not hasattr(obj, "__dict__") and not slot_names:
        raise TypeError(f"Object of type '{type(obj).__qualname__}' has no attributes to convert")

    result = dict(getattr(obj, "__dict__", {}))
    for name in slot_names:
        if hasattr(obj, name):
            result[name] = getattr(obj, name)
    return result
