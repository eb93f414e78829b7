"""Translate TLS cipher suite names to IANA ids and back."""

from .errors import CipherSuiteError, CorruptKey, MalformedName, NameTooLong, UnknownFragment
from .lookup import (
    UNKNOWN_SUITE_ID,
    SuiteName,
    cipher_list_to_ids,
    ids_to_cipher_list,
    iter_cipher_list,
    lookup_id,
    lookup_name,
    walk_cipher_list,
)

__all__ = [
    "CipherSuiteError",
    "CorruptKey",
    "MalformedName",
    "NameTooLong",
    "UnknownFragment",
    "UNKNOWN_SUITE_ID",
    "SuiteName",
    "cipher_list_to_ids",
    "ids_to_cipher_list",
    "iter_cipher_list",
    "lookup_id",
    "lookup_name",
    "walk_cipher_list",
]
