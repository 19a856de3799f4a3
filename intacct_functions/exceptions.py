"""Exception classes for intacct_functions."""

from typing import Any


class IntacctFunctionError(Exception):
    """Base exception for all intacct_functions errors."""


class UnsupportedVerbError(IntacctFunctionError):
    """Raised when a Function is constructed with a verb outside the allow-list.

    Attributes:
        verb: The rejected verb as supplied by the caller
    """

    def __init__(self, message: str, verb: Any = None):
        super().__init__(message)
        self.verb = verb


class UnsupportedValueTypeError(IntacctFunctionError):
    """Raised when an argument value cannot be rendered as XML.

    Only scalars, mappings (including Pydantic models) and sequences of
    mappings are accepted. Anything else fails serialization instead of
    being stringified.

    Attributes:
        value: The offending value
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value
