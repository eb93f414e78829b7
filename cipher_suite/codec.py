"""
Suite key codec for cipher suite names.

A suite key is 6 bytes holding 8 fragment indices of 6 bits each, packed as
two groups of four indices into 3 bytes:

    byte 0: i0[5:0] i1[5:4]      byte 3: i4[5:0] i5[5:4]
    byte 1: i1[3:0] i2[5:2]      byte 4: i5[3:0] i6[5:2]
    byte 2: i2[1:0] i3[5:0]      byte 5: i6[1:0] i7[5:0]

Unused trailing slots hold 0. Names starting with "TLS" use "_" between
fragments, all other spellings use "-".
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, Union

from .config import CONFIG
from .errors import CorruptKey, MalformedName, NameTooLong, UnknownFragment
from .fragments import FRAGMENTS, TLS_INDEX, index_of, text_of

KEY_LEN = 6
MAX_FIELDS = 8
_INDEX_MASK = 0x3F

RFC_SEPARATOR = "_"
ALIAS_SEPARATOR = "-"


def pack_indices(indices: Sequence[int]) -> bytes:
    """Pack up to 8 fragment indices into a 6-byte suite key."""

    if len(indices) > MAX_FIELDS:
        raise MalformedName(f"suite key holds at most {MAX_FIELDS} fragments, got {len(indices)}")
    slots = [value & _INDEX_MASK for value in indices]
    slots.extend([0] * (MAX_FIELDS - len(slots)))

    out = bytearray(KEY_LEN)
    for group in range(2):
        a, b, c, d = slots[group * 4:group * 4 + 4]
        base = group * 3
        out[base] = (a << 2 | b >> 4) & 0xFF
        out[base + 1] = (b << 4 | c >> 2) & 0xFF
        out[base + 2] = (c << 6 | d) & 0xFF
    return bytes(out)


def unpack_key(key: bytes) -> Tuple[int, ...]:
    """Unpack a 6-byte suite key into its 8 fragment indices."""

    if len(key) != KEY_LEN:
        raise CorruptKey(f"suite key must be {KEY_LEN} bytes, got {len(key)}")
    indices = []
    for base in (0, 3):
        b0, b1, b2 = key[base], key[base + 1], key[base + 2]
        indices.append(b0 >> 2)
        indices.append(((b0 << 4) & _INDEX_MASK) | b1 >> 4)
        indices.append(((b1 << 2) & _INDEX_MASK) | b2 >> 6)
        indices.append(b2 & _INDEX_MASK)
    return tuple(indices)


def separator_for(name: str) -> str:
    """Return the fragment separator implied by a spelling's prefix."""

    return RFC_SEPARATOR if name[:3].upper() == "TLS" else ALIAS_SEPARATOR


def _as_text(name: Union[str, bytes]) -> str:
    if isinstance(name, (bytes, bytearray)):
        try:
            name = bytes(name).decode("ascii")
        except UnicodeDecodeError as exc:
            raise UnknownFragment(f"non-ASCII cipher suite name: {name!r}") from exc
    # A NUL terminates the name, as it would for a C string handed to a backend.
    return name.split("\0", 1)[0]


def encode_name(name: Union[str, bytes]) -> bytes:
    """Encode a cipher suite spelling into its 6-byte suite key.

    Raises MalformedName for more than 8 fields and UnknownFragment for any
    field missing from the fragment dictionary (empty fields included).
    """

    text = _as_text(name)
    fields = text.split(separator_for(text))
    if len(fields) > MAX_FIELDS:
        raise MalformedName(f"too many fields in cipher suite name: {text!r}")

    indices = []
    for field in fields:
        index = index_of(field)
        if index == 0:
            raise UnknownFragment(f"unknown fragment {field!r} in {text!r}")
        indices.append(index)

    return pack_indices(indices)


def decode_key(key: bytes, max_len: Optional[int] = None) -> str:
    """Rebuild the spelling encoded in ``key``.

    Raises CorruptKey for indices beyond the dictionary and NameTooLong when the
    result exceeds ``max_len`` characters (default ``CONFIG["NAME_MAX_LEN"]``).
    """

    if max_len is None:
        max_len = CONFIG["NAME_MAX_LEN"]

    indices = unpack_key(key)
    separator = RFC_SEPARATOR if indices[0] == TLS_INDEX else ALIAS_SEPARATOR

    parts = []
    for index in indices:
        if index == 0:
            break
        if index >= len(FRAGMENTS):
            raise CorruptKey(f"fragment index {index} out of range in key {key.hex()}")
        parts.append(text_of(index))

    name = separator.join(parts)
    if len(name) > max_len:
        raise NameTooLong(f"{name} needs {len(name)} characters, limit is {max_len}")
    return name
