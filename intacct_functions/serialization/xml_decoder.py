"""Parse rendered function XML back into Python values."""

import xml.etree.ElementTree as ET
from typing import Any

from pydantic import BaseModel, Field


class ParsedFunction(BaseModel):
    """A function element read back from XML.

    Attributes:
        controlid: The controlid attribute of the function element
        verb: Tag of the function's only child (a verb or a transaction wrapper)
        body: Contents of that child as nested dicts
    """
    controlid: str
    verb: str
    body: dict[str, Any] = Field(default_factory=dict)


def parse_function(xml_string: str) -> ParsedFunction:
    """Parse the output of Function.to_xml().

    Args:
        xml_string: XML string with a single function root element

    Returns:
        ParsedFunction with the controlid, verb tag and decoded body

    Raises:
        ET.ParseError: If XML is malformed
        ValueError: If the root is not a function element with one child

    Example:
        >>> xml = '<function controlid="x"><read><object>customer</object></read></function>'
        >>> parse_function(xml).body
        {'object': 'customer'}
    """
    root = ET.fromstring(xml_string)
    if root.tag != "function":
        raise ValueError(f"Expected <function> root element, got <{root.tag}>")
    if len(root) != 1:
        raise ValueError(f"Expected exactly one verb element, got {len(root)}")

    verb_element = root[0]
    return ParsedFunction(
        controlid=root.get("controlid", ""),
        verb=verb_element.tag,
        body=_element_to_dict(verb_element),
    )


def xml_to_arguments(xml_string: str) -> dict[str, Any]:
    """Decode the children of an XML element into a dictionary.

    Repeated sibling tags are collected into a list. Leaf elements decode
    to their text, with empty elements decoding to "".

    Example:
        >>> xml_to_arguments('<CUSTOMER><name>Acme</name></CUSTOMER>')
        {'name': 'Acme'}
    """
    return _element_to_dict(ET.fromstring(xml_string))


def _element_to_dict(element: ET.Element) -> dict[str, Any]:
    """Convert an XML element to a dictionary."""
    result = {}

    for child in element:
        value = _element_to_value(child)

        # Handle duplicate tags (convert to list)
        if child.tag in result:
            if not isinstance(result[child.tag], list):
                result[child.tag] = [result[child.tag]]
            result[child.tag].append(value)
        else:
            result[child.tag] = value

    return result


def _element_to_value(element: ET.Element) -> Any:
    if len(element) > 0:
        return _element_to_dict(element)
    return element.text or ""
