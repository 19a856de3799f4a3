"""Core data types for intacct_functions."""

from dataclasses import dataclass
from enum import Enum


class Verb(str, Enum):
    """Operations accepted by the API's function element."""

    READ_BY_QUERY = "readByQuery"
    READ_MORE = "readMore"
    READ = "read"
    READ_BY_NAME = "readByName"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class VerbFamily(str, Enum):
    """Body shape a verb is rendered with."""

    READ = "read"
    WRITE = "write"


class TagCase(str, Enum):
    """Casing convention applied to caller-supplied argument tags."""

    PRESERVE = "preserve"
    UPPER = "upper"

    def apply(self, key) -> str:
        name = str(key)
        if self is TagCase.UPPER:
            return name.upper()
        return name


@dataclass(frozen=True)
class ReadPolicy:
    """Argument selection rules for a read-family verb.

    Attributes:
        candidates: Argument keys that may appear, in output order
        required: Keys emitted even when blank (subset of candidates)
    """
    candidates: tuple[str, ...]
    required: tuple[str, ...] = ()
