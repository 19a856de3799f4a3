"""Convert argument values to XML elements."""

import xml.etree.ElementTree as ET
from collections.abc import Mapping
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel

from intacct_functions.exceptions import UnsupportedValueTypeError

TagNameFn = Callable[[Any], str]


def arguments_to_xml(arguments: Mapping | BaseModel, tag_name: TagNameFn = str) -> str:
    """Render a mapping of named values as an XML fragment.

    Each key becomes one element, in the mapping's iteration order. The
    fragment has no root element of its own. Text escapes &, < and >;
    quotes are left as-is since they are only significant in attributes.

    Args:
        arguments: Mapping (or Pydantic model) of argument name to value
        tag_name: Function deriving the tag name from each key

    Returns:
        Concatenated XML elements

    Raises:
        UnsupportedValueTypeError: If a value is not a scalar, mapping or
            sequence of mappings

    Example:
        >>> arguments_to_xml({"name": "Acme", "address": {"city": "Reno"}})
        '<name>Acme</name><address><city>Reno</city></address>'
    """
    holder = ET.Element("_fragment")
    append_arguments(holder, arguments, tag_name)
    return "".join(
        ET.tostring(child, encoding="unicode", short_empty_elements=False)
        for child in holder
    )


def append_arguments(
    parent: ET.Element,
    arguments: Mapping | BaseModel,
    tag_name: TagNameFn = str,
) -> None:
    """Append one sub-element per argument under parent."""
    for key, value in _items(arguments):
        element = ET.SubElement(parent, tag_name(key))
        _value_to_element(element, value, tag_name)


def _items(arguments: Mapping | BaseModel):
    if isinstance(arguments, BaseModel):
        # Skip unset optional fields, keep declaration order
        return [
            (name, getattr(arguments, name))
            for name in type(arguments).model_fields
            if getattr(arguments, name) is not None
        ]
    if isinstance(arguments, Mapping):
        return arguments.items()
    raise UnsupportedValueTypeError(
        f"Expected a mapping of arguments, got {type(arguments).__name__}",
        value=arguments,
    )


def scalar_to_text(value: Any) -> str:
    """Render a scalar the way it appears as element text.

    None renders as "", booleans lowercase, dates and datetimes in ISO
    format, enums as their value.

    Raises:
        UnsupportedValueTypeError: If value is not a scalar
    """
    if value is None:
        return ""

    elif isinstance(value, datetime):
        return value.isoformat()

    elif isinstance(value, date):
        return value.isoformat()

    elif isinstance(value, Enum):
        return str(value.value)

    elif isinstance(value, bool):
        # Boolean as lowercase string
        return str(value).lower()

    elif isinstance(value, (int, float, Decimal)):
        return str(value)

    elif isinstance(value, str):
        return value

    raise UnsupportedValueTypeError(
        f"Cannot render {type(value).__name__} as text", value=value
    )


def _value_to_element(element: ET.Element, value: Any, tag_name: TagNameFn) -> None:
    """Convert a value to XML content within element."""
    if value is None:
        # Empty element for None
        return

    elif isinstance(value, (Mapping, BaseModel)):
        # Nested record
        append_arguments(element, value, tag_name)

    elif isinstance(value, (list, tuple)):
        # Repeated records share the parent element, no per-item wrapper
        for record in value:
            if not isinstance(record, (Mapping, BaseModel)):
                raise UnsupportedValueTypeError(
                    f"Sequence items under <{element.tag}> must be mappings, "
                    f"got {type(record).__name__}",
                    value=record,
                )
            append_arguments(element, record, tag_name)

    else:
        try:
            # Escaped on output, empty strings kept as empty elements
            element.text = scalar_to_text(value)
        except UnsupportedValueTypeError as e:
            raise UnsupportedValueTypeError(
                f"Cannot render {type(value).__name__} under <{element.tag}>",
                value=value,
            ) from e


def indent(element: ET.Element, level: int = 0) -> None:
    """Add pretty-printing indentation to XML tree.

    Modifies the tree in-place by adding text and tail attributes.
    """
    indent_str = "\n" + "  " * level
    if len(element):  # Has children
        if not element.text or not element.text.strip():
            element.text = indent_str + "  "
        if not element.tail or not element.tail.strip():
            element.tail = indent_str
        for child in element:
            indent(child, level + 1)
        if not child.tail or not child.tail.strip():
            child.tail = indent_str
    else:  # Leaf element
        if level and (not element.tail or not element.tail.strip()):
            element.tail = indent_str
