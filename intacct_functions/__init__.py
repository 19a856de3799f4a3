"""intacct_functions - function payload builder for the Intacct XML API.

Turns a verb, an entity type and nested arguments into the <function>
element the API expects inside a request envelope.
"""

from intacct_functions._version import __version__
from intacct_functions.exceptions import (
    IntacctFunctionError,
    UnsupportedValueTypeError,
    UnsupportedVerbError,
)
from intacct_functions.function import ALLOWED_VERBS, Function, normalize_read_value
from intacct_functions.serialization import arguments_to_xml, parse_function, xml_to_arguments
from intacct_functions.types import ReadPolicy, TagCase, Verb, VerbFamily

__all__ = [
    "__version__",
    "Function",
    "ALLOWED_VERBS",
    "normalize_read_value",
    "Verb",
    "VerbFamily",
    "TagCase",
    "ReadPolicy",
    "IntacctFunctionError",
    "UnsupportedVerbError",
    "UnsupportedValueTypeError",
    "arguments_to_xml",
    "parse_function",
    "xml_to_arguments",
]
