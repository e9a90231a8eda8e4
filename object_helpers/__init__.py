"""Helpers for object introspection."""
from . import log, exceptions, typing, convert, invoking
from .log import get_logger
from .exceptions import (
    InstanceOfError,
    MethodNotFoundError,
    MissingArgumentError,
    ObjectHelperException,
)
from .typing import check_type, instance_of
from .convert import to_dict
from .invoking import ParameterDescriptor, get_parameter_descriptors, invoke

log.add_supress_traceback_module(invoking)
