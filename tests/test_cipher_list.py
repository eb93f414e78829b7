"""
Tests for walking cipher list strings entry by entry.
"""

import logging

import pytest

from cipher_suite.config import CONFIG
from cipher_suite.lookup import (
    UNKNOWN_SUITE_ID,
    cipher_list_to_ids,
    ids_to_cipher_list,
    iter_cipher_list,
    walk_cipher_list,
)


class _Collect(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def log_records():
    logger = logging.getLogger("cipher_suite")
    handler = _Collect()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)


def test_walk_mixed_separators():
    """Cursor-driven walk over ':' and ', ' separated entries."""
    text = "AES128-SHA:ECDHE-RSA-AES256-GCM-SHA384, BAD-NAME"

    suite_id, start, end = walk_cipher_list(text)
    assert (suite_id, text[start:end]) == (0x002F, "AES128-SHA")

    suite_id, start, end = walk_cipher_list(text, end)
    assert (suite_id, text[start:end]) == (0xC030, "ECDHE-RSA-AES256-GCM-SHA384")

    suite_id, start, end = walk_cipher_list(text, end)
    assert (suite_id, text[start:end]) == (UNKNOWN_SUITE_ID, "BAD-NAME")

    suite_id, start, end = walk_cipher_list(text, end)
    assert start == end == len(text)
    assert suite_id == UNKNOWN_SUITE_ID


def test_walk_skips_leading_separators():
    text = " \t;,:TLS_AES_256_GCM_SHA384;"
    suite_id, start, end = walk_cipher_list(text)
    assert suite_id == 0x1302
    assert (start, end) == (5, len(text) - 1)


def test_walk_only_separators():
    assert walk_cipher_list(" :; ,\t") == (UNKNOWN_SUITE_ID, 6, 6)


def test_walk_empty_string():
    assert walk_cipher_list("") == (UNKNOWN_SUITE_ID, 0, 0)


def test_walk_cursor_past_end():
    assert walk_cipher_list("AES128-SHA", 100) == (UNKNOWN_SUITE_ID, 10, 10)


def test_walk_stops_at_nul():
    text = "AES128-SHA\0AES256-SHA"
    assert walk_cipher_list(text) == (0x002F, 0, 10)
    assert walk_cipher_list(text, 10) == (UNKNOWN_SUITE_ID, 10, 10)


def test_iter_cipher_list():
    entries = list(iter_cipher_list("ECDHE-ECDSA-AES128-GCM-SHA256 TLS_CHACHA20_POLY1305_SHA256,,nope"))
    assert entries == [
        ("ECDHE-ECDSA-AES128-GCM-SHA256", 0xC02B),
        ("TLS_CHACHA20_POLY1305_SHA256", 0x1303),
        ("nope", UNKNOWN_SUITE_ID),
    ]


def test_iter_empty_list():
    assert list(iter_cipher_list(":::")) == []


def test_cipher_list_to_ids_skips_unknown_and_duplicates(log_records):
    text = "AES128-SHA:TLS_RSA_WITH_AES_128_CBC_SHA:BOGUS:AES256-SHA"
    assert cipher_list_to_ids(text) == (0x002F, 0x0035)

    warnings = [r for r in log_records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "BOGUS" in warnings[0].getMessage()
    assert warnings[0].cipher == "BOGUS"


def test_cipher_list_to_ids_quiet(monkeypatch, log_records):
    monkeypatch.setitem(CONFIG, "LOG_UNKNOWN_CIPHERS", False)
    assert cipher_list_to_ids("BOGUS AES128-SHA") == (0x002F,)
    assert not [r for r in log_records if r.levelno >= logging.WARNING]


def test_ids_to_cipher_list():
    assert ids_to_cipher_list([0x002F, 0x0035], prefer_rfc=False) == "AES128-SHA:AES256-SHA"
    assert ids_to_cipher_list([0x1301], prefer_rfc=True, sep=",") == "TLS_AES_128_GCM_SHA256"
    assert ids_to_cipher_list([]) == ""


def test_ids_to_cipher_list_unknown_placeholder():
    assert ids_to_cipher_list([0x002F, 0xFFFF], prefer_rfc=False, sep=" ") == "AES128-SHA TLS_UNKNOWN_0xFFFF"


def test_cipher_list_survives_round_trip():
    ids = (0xC02F, 0xC030, 0xCCA8, 0x009C)
    for prefer_rfc in (True, False):
        assert cipher_list_to_ids(ids_to_cipher_list(ids, prefer_rfc=prefer_rfc)) == ids


def test_walk_bytes_input():
    text = b"AES128-SHA:ECDHE-RSA-AES256-GCM-SHA384, BAD-NAME"

    suite_id, start, end = walk_cipher_list(text)
    assert (suite_id, text[start:end]) == (0x002F, b"AES128-SHA")

    suite_id, start, end = walk_cipher_list(text, end)
    assert (suite_id, text[start:end]) == (0xC030, b"ECDHE-RSA-AES256-GCM-SHA384")

    suite_id, start, end = walk_cipher_list(text, end)
    assert (suite_id, text[start:end]) == (UNKNOWN_SUITE_ID, b"BAD-NAME")

    assert walk_cipher_list(text, end) == (UNKNOWN_SUITE_ID, len(text), len(text))


def test_walk_bytes_non_ascii_token():
    """Offsets stay byte offsets; a non-ASCII token just does not resolve."""
    text = "AES128-SHA:é:AES256-SHA".encode("latin-1")
    assert [walk_cipher_list(text, pos)[0] for pos in (0, 10, 12)] == [0x002F, UNKNOWN_SUITE_ID, 0x0035]
    assert walk_cipher_list(text, 10)[1:] == (11, 12)


def test_bytes_list_helpers():
    assert list(iter_cipher_list(b"AES128-SHA nope")) == [("AES128-SHA", 0x002F), ("nope", UNKNOWN_SUITE_ID)]
    assert cipher_list_to_ids(bytearray(b"AES256-SHA;AES128-SHA\0AES256-GCM-SHA384")) == (0x0035, 0x002F)
