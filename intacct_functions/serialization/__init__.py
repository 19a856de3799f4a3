"""XML serialization for function arguments."""

from intacct_functions.serialization.xml_encoder import append_arguments, arguments_to_xml
from intacct_functions.serialization.xml_decoder import (
    ParsedFunction,
    parse_function,
    xml_to_arguments,
)

__all__ = [
    "append_arguments",
    "arguments_to_xml",
    "ParsedFunction",
    "parse_function",
    "xml_to_arguments",
]
