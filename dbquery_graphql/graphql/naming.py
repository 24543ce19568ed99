"""Schema names of synthesized result-set types.

``DB_QUERY_<Element>`` names the result-set type wrapping ``Element``;
``DB_META`` names the metadata type they all share.
"""

from __future__ import annotations

QUERY_TYPE_PREFIX = "DB_QUERY_"
META_TYPE_NAME = "DB_META"

# Where the element name starts inside an encoded name
ELEMENT_NAME_OFFSET = len(QUERY_TYPE_PREFIX)


def encode(element_name: str) -> str:
    """Return the result-set type name for an element type name.

    Example:
        >>> encode("User")
        'DB_QUERY_User'
    """
    return QUERY_TYPE_PREFIX + element_name


def is_query_type_name(type_name: str) -> bool:
    return type_name.startswith(QUERY_TYPE_PREFIX)


def decode(type_name: str) -> str:
    """Return the element type name wrapped by a result-set type name.

    Raises:
        ValueError: If ``type_name`` does not carry the result-set prefix.

    Example:
        >>> decode("DB_QUERY_User")
        'User'
    """
    if not is_query_type_name(type_name):
        raise ValueError(f"{type_name!r} is not a result-set type name")
    return type_name[ELEMENT_NAME_OFFSET:]


__all__ = [
    "ELEMENT_NAME_OFFSET",
    "META_TYPE_NAME",
    "QUERY_TYPE_PREFIX",
    "decode",
    "encode",
    "is_query_type_name",
]
