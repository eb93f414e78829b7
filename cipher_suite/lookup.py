"""
Cipher suite lookups by name and by IANA id.

Backends that only accept numeric suite ids use these helpers to translate a
user supplied cipher list ("ECDHE-RSA-AES128-GCM-SHA256:AES128-SHA") into ids
and to render ids back into readable names. Bad input never raises here: an
unresolved name maps to UNKNOWN_SUITE_ID and an unknown id renders as a
TLS_UNKNOWN_0xHHHH placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .codec import decode_key, encode_name
from .config import CONFIG, LIST_SEPARATORS
from .errors import CipherSuiteError
from .logging_utils import get_logger
from .table import SUITE_TABLE, SUITES_BY_ID

logger = get_logger("cipher_suite")

# Returned for names that do not resolve. 0x0000 is TLS_NULL_WITH_NULL_NULL,
# which no backend accepts for negotiation.
UNKNOWN_SUITE_ID = 0


@dataclass(frozen=True)
class SuiteName:
    text: str
    ok: bool


def _build_key_index() -> Dict[bytes, int]:
    # first entry wins, same result as scanning the table in order
    index: Dict[bytes, int] = {}
    for entry in SUITE_TABLE:
        index.setdefault(entry.key, entry.suite_id)
    return index


_ID_BY_KEY = _build_key_index()


def lookup_id(name: Union[str, bytes]) -> int:
    """Return the IANA id for a suite spelling, or UNKNOWN_SUITE_ID."""

    if not name:
        return UNKNOWN_SUITE_ID
    try:
        key = encode_name(name)
    except CipherSuiteError as exc:
        logger.debug("cipher suite name not encodable: %s", exc)
        return UNKNOWN_SUITE_ID

    suite_id = _ID_BY_KEY.get(key, UNKNOWN_SUITE_ID)
    if suite_id == UNKNOWN_SUITE_ID:
        logger.debug("no cipher suite for %r", name)
    return suite_id


def _placeholder(suite_id: int, max_len: int) -> str:
    return f"TLS_UNKNOWN_0x{suite_id & 0xFFFF:04X}"[:max(max_len, 0)]


def lookup_name(suite_id: int, max_len: Optional[int] = None,
                prefer_rfc: Optional[bool] = None) -> SuiteName:
    """Render ``suite_id`` as a name.

    With ``prefer_rfc`` True the IANA "TLS_..." spelling is chosen when the
    table has one, with False the OpenSSL-style alias; otherwise the first
    spelling listed for the id is used. Unknown ids, and spellings longer than
    ``max_len``, give the TLS_UNKNOWN_0xHHHH placeholder with ``ok`` False.
    """

    if max_len is None:
        max_len = CONFIG["NAME_MAX_LEN"]
    if prefer_rfc is None:
        prefer_rfc = CONFIG["PREFER_RFC_NAMES"]

    chosen = None
    for entry in SUITES_BY_ID.get(suite_id, ()):
        if entry.is_rfc == prefer_rfc:
            chosen = entry
            break
        if chosen is None:
            chosen = entry

    if chosen is not None:
        try:
            return SuiteName(decode_key(chosen.key, max_len), True)
        except CipherSuiteError as exc:
            logger.debug("cannot render suite 0x%04X: %s", suite_id, exc)

    return SuiteName(_placeholder(suite_id, max_len), False)


def _list_text(text: Union[str, bytes]) -> str:
    # latin-1 keeps one character per byte, so offsets are byte offsets and
    # non-ASCII tokens simply fail to resolve
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("latin-1")
    return text


def _end_of_input(text: str) -> int:
    nul = text.find("\0")
    return len(text) if nul < 0 else nul


def walk_cipher_list(text: Union[str, bytes], pos: int = 0) -> Tuple[int, int, int]:
    """Resolve the next entry of a cipher list.

    Skips separators (space, tab, ':', ',', ';') from ``pos`` and returns
    ``(suite_id, start, end)`` for the token found; pass ``end`` back in to
    continue. At end of input ``start == end`` and the id is UNKNOWN_SUITE_ID.
    ``bytes`` input is walked by byte offset.
    """

    text = _list_text(text)
    limit = _end_of_input(text)
    start = min(max(pos, 0), limit)
    while start < limit and text[start] in LIST_SEPARATORS:
        start += 1

    end = start
    while end < limit and text[end] not in LIST_SEPARATORS:
        end += 1

    return lookup_id(text[start:end]), start, end


def iter_cipher_list(text: Union[str, bytes]) -> Iterator[Tuple[str, int]]:
    """Yield ``(token, suite_id)`` for every entry of a cipher list."""

    text = _list_text(text)
    pos = 0
    while True:
        suite_id, start, end = walk_cipher_list(text, pos)
        if start == end:
            return
        yield text[start:end], suite_id
        pos = end


def cipher_list_to_ids(text: Union[str, bytes]) -> Tuple[int, ...]:
    """Translate a cipher list into suite ids, in order, without duplicates.

    Entries that do not resolve are skipped, the way a backend drops ciphers
    it does not support.
    """

    ids = []
    seen = set()
    for token, suite_id in iter_cipher_list(text):
        if suite_id == UNKNOWN_SUITE_ID:
            if CONFIG["LOG_UNKNOWN_CIPHERS"]:
                logger.warning("unknown cipher in list: %s", token, extra={"cipher": token})
            continue
        if suite_id in seen:
            continue
        seen.add(suite_id)
        ids.append(suite_id)
    return tuple(ids)


def ids_to_cipher_list(ids: Iterable[int], prefer_rfc: Optional[bool] = None,
                       sep: Optional[str] = None) -> str:
    """Join the names of ``ids`` into a cipher list string.

    Unknown ids are rendered as their TLS_UNKNOWN_0xHHHH placeholder.
    """

    if sep is None:
        sep = CONFIG["CIPHER_LIST_SEPARATOR"]
    return sep.join(lookup_name(suite_id, prefer_rfc=prefer_rfc).text for suite_id in ids)
