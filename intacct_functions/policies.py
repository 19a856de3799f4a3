"""Per-verb structural rules."""

from intacct_functions.types import ReadPolicy, Verb, VerbFamily


READ_POLICIES: dict[Verb, ReadPolicy] = {
    Verb.READ: ReadPolicy(candidates=("keys", "fields"), required=("keys",)),
    Verb.READ_BY_NAME: ReadPolicy(candidates=("keys", "fields"), required=("keys",)),
    Verb.READ_BY_QUERY: ReadPolicy(
        candidates=("fields", "query", "pagesize", "docparid"),
        required=("query",),
    ),
    Verb.READ_MORE: ReadPolicy(
        candidates=("fields", "query", "pagesize", "docparid"),
        required=("query",),
    ),
    Verb.DELETE: ReadPolicy(candidates=("keys",)),
}

# delete with keys required, used when Function.strict_delete is set
STRICT_DELETE_POLICY = ReadPolicy(candidates=("keys",), required=("keys",))

# Entity types whose writes go through a legacy transaction function.
# The wrapper element replaces the verb element entirely.
TRANSACTION_WRAPPERS: dict[str, dict[Verb, str]] = {
    "sodocument": {Verb.CREATE: "create_sotransaction"},
}


def family_of(verb: Verb) -> VerbFamily:
    """Classify a verb by the body shape it renders."""
    if verb in READ_POLICIES:
        return VerbFamily.READ
    return VerbFamily.WRITE


def read_policy(verb: Verb, strict_delete: bool = False) -> ReadPolicy:
    """Look up the argument selection rules for a read-family verb.

    Raises:
        KeyError: If verb is not in the read family
    """
    if verb is Verb.DELETE and strict_delete:
        return STRICT_DELETE_POLICY
    return READ_POLICIES[verb]
