"""ECMAScript identifier name checks."""

# Allowed in identifier names by ECMAScript but not by Python.
_ZWNJ = "\u200c"
_ZWJ = "\u200d"


def is_identifier_name(name: str) -> bool:
    """Check if ``name`` is a valid ECMAScript IdentifierName.

    ``$`` and ``_`` may appear anywhere, ZWNJ/ZWJ anywhere but the start.
    Everything else follows Unicode ID_Start / ID_Continue, which is what
    :meth:`str.isidentifier` checks.

    Example:
        is_identifier_name("$foo")  -> True
        is_identifier_name("b-ar")  -> False
    """
    if not name:
        return False

    first, rest = name[0], name[1:]
    if first in (_ZWNJ, _ZWJ):
        return False

    normalized = first.replace("$", "_") + "".join(
        "_" if char in ("$", _ZWNJ, _ZWJ) else char for char in rest
    )
    return normalized.isidentifier()
