"""Calling methods with arguments bound from name-to-value mappings."""
from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

import attrs
from typeguard import typechecked

from . import log
from .exceptions import MethodNotFoundError, MissingArgumentError

logger = log.get_logger("object_helpers")

VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@attrs.frozen
class ParameterDescriptor:
    name: str
    position: int
    optional: bool
    kind: Any = inspect.Parameter.POSITIONAL_OR_KEYWORD
    default: Any = inspect.Parameter.empty

    @classmethod
    def from_parameter(cls, param: inspect.Parameter, position: int) -> ParameterDescriptor:
        return cls(
            name=param.name,
            position=position,
            optional=param.default is not inspect.Parameter.empty or param.kind in VARIADIC_KINDS,
            kind=param.kind,
            default=param.default,
        )


def _get_type_name(target: Any) -> str:
    if isinstance(target, type):
        return target.__qualname__
    return type(target).__qualname__


def _resolve_method(
    target: Any, method_name: str
) -> tuple[Callable[..., Any], list[ParameterDescriptor]]:
    type_name = _get_type_name(target)
    try:
        method = getattr(target, method_name)
    except AttributeError:
        raise MethodNotFoundError(method_name, type_name) from None

    if not callable(method):
        raise MethodNotFoundError(method_name, type_name, reason="is not callable")

    try:
        signature = inspect.signature(method)
    except (ValueError, TypeError):
        raise MethodNotFoundError(
            method_name, type_name, reason="has no introspectable signature"
        ) from None

    descriptors = [
        ParameterDescriptor.from_parameter(param, i)
        for i, param in enumerate(signature.parameters.values())
    ]
    return method, descriptors


def get_parameter_descriptors(target: Any, method_name: str) -> list[ParameterDescriptor]:
    """
    Returns the declared parameters of ``method_name`` on ``target`` in declaration
    order. For bound methods the implicit ``self``/``cls`` is not included.

    :raises MethodNotFoundError: if the method can not be resolved.
    """
    _, descriptors = _resolve_method(target, method_name)
    return descriptors


@typechecked
def invoke(target: Any, method_name: str, argument_map: Mapping[str, Any] | None = None) -> Any:
    """
    Call ``method_name`` on ``target``, binding values from ``argument_map`` to the
    method's parameters by name.

    Keys that do not name a declared parameter are ignored, even when the method
    takes ``**kwargs``. Optional parameters that are not in ``argument_map`` keep
    the method's own defaults. Variadic parameters are never bound.

    :param target: The object on which the method is looked up.
    :param method_name: Name of the method, inherited methods included.
    :param argument_map: Mapping from parameter name to argument value.
    :raises MethodNotFoundError: if the method can not be resolved.
    :raises MissingArgumentError: for the first required parameter, in declaration
        order, that has no key in ``argument_map``. The method is not called.
    :return: Whatever the method returns.
    """
    if argument_map is None:
        argument_map = {}

    method, descriptors = _resolve_method(target, method_name)

    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    bound: list[str] = []
    for desc in descriptors:
        if desc.kind in VARIADIC_KINDS:
            continue
        if desc.name in argument_map:
            value = argument_map[desc.name]
            bound.append(desc.name)
        elif not desc.optional:
            logger.debug(
                f"Missing argument '{desc.name}' for '{_get_type_name(target)}.{method_name}'"
            )
            raise MissingArgumentError(desc.name, method_name, _get_type_name(target))
        elif desc.kind is inspect.Parameter.POSITIONAL_ONLY:
            # later positional-only values must stay in their slots
            value = desc.default
        else:
            continue

        if desc.kind is inspect.Parameter.POSITIONAL_ONLY:
            args.append(value)
        else:
            kwargs[desc.name] = value

    ignored = sorted(set(argument_map) - set(bound))
    if ignored:
        logger.debug(f"Ignoring arguments {ignored} not declared by '{method_name}'")
    logger.debug(f"Calling '{_get_type_name(target)}.{method_name}' with arguments {bound}")
    return method(*args, **kwargs)
