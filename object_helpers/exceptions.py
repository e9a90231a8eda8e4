from __future__ import annotations

from typing import Sequence


class ObjectHelperException(Exception):
    ...


class MethodNotFoundError(ObjectHelperException, AttributeError):
    """Raised when a method can not be resolved on a target."""

    def __init__(self, method_name: str, type_name: str, reason: str = "does not exist"):
        self.method_name = method_name
        self.type_name = type_name
        super().__init__(f"The method '{method_name}' {reason} in class '{type_name}'.")


class MissingArgumentError(ObjectHelperException, TypeError):
    """Raised when a required parameter has no value in the argument map."""

    def __init__(self, parameter_name: str, method_name: str, type_name: str):
        self.parameter_name = parameter_name
        self.method_name = method_name
        self.type_name = type_name
        super().__init__(
            f"The argument '{parameter_name}' is required for method '{method_name}' "
            f"in class '{type_name}'."
        )


class InstanceOfError(ObjectHelperException, TypeError):
    """Raised when a value is not an instance of any of the expected classes."""

    def __init__(self, expected: Sequence[str]):
        self.expected = tuple(expected)
        super().__init__(
            "The given variable must be an instance of: " + ",".join(self.expected)
        )
