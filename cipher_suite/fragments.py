"""Fragment dictionary for cipher suite names.

Every suite spelling is a run of short uppercase tokens ("TLS", "ECDHE",
"AES128", ...). Each token is stored once here and referenced by its 1-based
position; position 0 is the empty sentinel used to pad suite keys.

Suite keys store indices in 6 bits, so the dictionary must never hold more
than 63 real fragments. Keep ``TLS`` at index 1.
"""

from __future__ import annotations

from typing import Tuple

from .errors import CorruptKey

FRAGMENTS: Tuple[str, ...] = (
    "",
    "TLS",
    "WITH",
    "128",
    "256",
    "3DES",
    "8",
    "AES",
    "AES128",
    "AES256",
    "CBC",
    "CBC3",
    "CCM",
    "CCM8",
    "CHACHA20",
    "DES",
    "DHE",
    "ECDH",
    "ECDHE",
    "ECDSA",
    "EDE",
    "GCM",
    "MD5",
    "NULL",
    "POLY1305",
    "PSK",
    "RSA",
    "SHA",
    "SHA256",
    "SHA384",
    "ARIA",
    "ARIA128",
    "ARIA256",
    "CAMELLIA",
    "CAMELLIA128",
    "CAMELLIA256",
)

INDEX_BITS = 6
MAX_FRAGMENTS = (1 << INDEX_BITS) - 1
TLS_INDEX = 1

if len(FRAGMENTS) - 1 > MAX_FRAGMENTS:
    raise NotImplementedError(
        f"fragment dictionary holds {len(FRAGMENTS) - 1} entries, limit is {MAX_FRAGMENTS}"
    )
if FRAGMENTS[TLS_INDEX] != "TLS":
    raise NotImplementedError("fragment dictionary must keep TLS at index 1")

_FOLDED = tuple(text.upper() for text in FRAGMENTS)


def text_of(index: int) -> str:
    """Return the fragment text stored at ``index`` (1-based)."""

    if not 0 < index < len(FRAGMENTS):
        raise CorruptKey(f"fragment index out of range: {index}")
    return FRAGMENTS[index]


def index_of(token: str) -> int:
    """Return the first index whose fragment equals ``token`` ignoring case.

    Returns 0 when no fragment matches. The empty token never matches.
    """

    if not token or not token.isascii():
        return 0
    folded = token.upper()
    for index in range(1, len(_FOLDED)):
        candidate = _FOLDED[index]
        if len(candidate) == len(token) and candidate == folded:
            return index
    return 0
