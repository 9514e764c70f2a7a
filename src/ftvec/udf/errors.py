"""UDF exception hierarchy.

Errors raised by the host boundary when binding a function to its
arguments. All of them surface at initialize time, before any row is
evaluated, and none of them is retryable: the caller must fix the query.

Exception hierarchy:
- UDFError (base)
  - UDFArgumentError (invalid arguments at bind time)
    - UDFArgumentLengthError (wrong number of arguments)
    - UDFArgumentTypeError (argument of the wrong type)
  - UnknownFunctionError (no function registered under a name)
"""

from __future__ import annotations


class UDFError(Exception):
    """Base exception for all UDF errors."""

    pass


class UDFArgumentError(UDFError):
    """Invalid arguments supplied to a UDF."""

    pass


class UDFArgumentLengthError(UDFArgumentError):
    """Wrong number of arguments."""

    pass


class UDFArgumentTypeError(UDFArgumentError):
    """Argument of an unsupported type.

    Attributes:
        arg_index: Zero-based position of the offending argument
    """

    def __init__(self, arg_index: int, message: str) -> None:
        self.arg_index = arg_index
        super().__init__(message)


class UnknownFunctionError(UDFError):
    """No UDF registered under the requested name.

    Attributes:
        name: Name that was looked up
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown function: '{name}'")
