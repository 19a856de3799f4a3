"""Function serializer: one API call rendered as a <function> element."""

import copy
import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from intacct_functions.exceptions import UnsupportedVerbError
from intacct_functions.policies import TRANSACTION_WRAPPERS, family_of, read_policy
from intacct_functions.serialization.xml_encoder import append_arguments, indent, scalar_to_text
from intacct_functions.types import TagCase, Verb, VerbFamily

logger = logging.getLogger(__name__)

ALLOWED_VERBS = tuple(verb.value for verb in Verb)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def normalize_read_value(value: Any) -> Any:
    """Normalize a read-family argument before the blank check.

    None and "" become None. Lists and tuples are comma-joined using the
    same text as element content (None items become ""), and an empty
    join is blank too. Anything else is returned unchanged.

    Example:
        >>> normalize_read_value(["RECORDNO", "NAME"])
        'RECORDNO,NAME'
    """
    if value is None or value == "":
        return None
    if isinstance(value, (list, tuple)):
        joined = ",".join(scalar_to_text(item) for item in value)
        return joined or None
    return value


class Function:
    """A single function call for the accounting API.

    A Function is defined by a verb (e.g. "create"), an entity type (e.g.
    "customer") and a mapping of arguments. It is immutable after
    construction and renders itself with to_xml().

    Class attributes (override in subclass):
        tag_case: Casing applied to argument tags (TagCase or its value)
        strict_delete: Require the keys argument on delete
        transaction_wrappers: entity type -> {verb: wrapper tag} overrides

    Example:
        >>> fn = Function("create", "customer", {"name": "Acme"})
        >>> fn.to_xml()  # doctest: +ELLIPSIS
        '<function controlid="create-customer-..."><create><CUSTOMER><name>Acme</name></CUSTOMER></create></function>'

    Example (upper-cased argument tags):
        >>> class UpperFunction(Function):
        ...     tag_case = TagCase.UPPER
        >>> UpperFunction("create", "customer", {"name": "Acme"}).to_xml()  # doctest: +ELLIPSIS
        '...<CUSTOMER><NAME>Acme</NAME></CUSTOMER>...'
    """

    tag_case: TagCase | str = TagCase.PRESERVE
    strict_delete: bool = False
    transaction_wrappers: dict[str, dict[Verb, str]] = TRANSACTION_WRAPPERS

    def __init__(
        self,
        verb: Verb | str,
        entity_type: str,
        arguments: Mapping | BaseModel | None = None,
        *,
        timestamp: datetime | None = None,
    ):
        try:
            self._verb = Verb(verb)
        except ValueError:
            raise UnsupportedVerbError(
                f"Verb {verb!r} not recognized. Verb must be one of {list(ALLOWED_VERBS)}.",
                verb=verb,
            ) from None

        self._entity_type = str(entity_type)
        if not self._entity_type.strip():
            raise ValueError("entity_type must be a non-blank object name.")

        self._arguments = MappingProxyType(_as_dict(arguments))

        if timestamp is None:
            timestamp = datetime.now(timezone.utc)
        elif timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        self._timestamp = timestamp.astimezone(timezone.utc)

    @property
    def verb(self) -> Verb:
        return self._verb

    @property
    def entity_type(self) -> str:
        return self._entity_type

    @property
    def arguments(self) -> Mapping:
        return self._arguments

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @property
    def controlid(self) -> str:
        """Correlation id echoed back by the API: verb-entity-timestamp."""
        stamp = self._timestamp.strftime(TIMESTAMP_FORMAT)
        return f"{self._verb.value}-{self._entity_type}-{stamp}"

    def read_arguments(self, candidates, *required) -> dict[str, Any]:
        """Select the arguments a read-family verb sends.

        Candidates are visited in order. A candidate is kept when its
        normalized value is non-blank or when it is listed in required;
        required keys with blank values are kept as None so they render
        as empty elements.

        Args:
            candidates: Argument keys that may appear, in output order
            *required: Keys that always appear

        Returns:
            Ordered dict of the selected arguments
        """
        selected = {}
        for key in candidates:
            value = normalize_read_value(self._arguments.get(key))
            if value is not None or key in required:
                selected[key] = value
            else:
                logger.debug("Omitting blank %s argument for %s", key, self._verb.value)
        return selected

    def to_xml(self, pretty: bool = False) -> str:
        """Render this function as a <function> element.

        Args:
            pretty: Indent the output

        Returns:
            XML string without declaration or namespace

        Raises:
            UnsupportedValueTypeError: If an argument value cannot be rendered
        """
        tag_name = TagCase(self.tag_case).apply
        root = ET.Element("function", controlid=self.controlid)

        wrapper = self.transaction_wrappers.get(self._entity_type, {}).get(self._verb)
        if wrapper is not None:
            body = ET.SubElement(root, wrapper)
            append_arguments(body, self._arguments, tag_name)

        elif family_of(self._verb) is VerbFamily.READ:
            body = ET.SubElement(root, self._verb.value)
            ET.SubElement(body, "object").text = self._entity_type
            policy = read_policy(self._verb, strict_delete=self.strict_delete)
            append_arguments(
                body,
                self.read_arguments(policy.candidates, *policy.required),
                tag_name,
            )

        else:
            body = ET.SubElement(root, self._verb.value)
            record = ET.SubElement(body, self._entity_type.upper())
            append_arguments(record, self._arguments, tag_name)

        if pretty:
            indent(root)

        logger.debug("Rendered function %s", self.controlid)
        return ET.tostring(root, encoding="unicode", short_empty_elements=False)

    def __repr__(self) -> str:
        return f"Function(verb={self._verb.value!r}, entity_type={self._entity_type!r})"


def _as_dict(arguments: Mapping | BaseModel | None) -> dict[str, Any]:
    if arguments is None:
        return {}
    if isinstance(arguments, BaseModel):
        return {
            name: copy.deepcopy(getattr(arguments, name))
            for name in type(arguments).model_fields
            if getattr(arguments, name) is not None
        }
    return copy.deepcopy(dict(arguments))
