"""
Tests for id/name lookups and synonym preference.
"""

import pytest

from cipher_suite.config import CONFIG
from cipher_suite.lookup import UNKNOWN_SUITE_ID, SuiteName, lookup_id, lookup_name


class TestLookupId:
    """Name to IANA id."""

    @pytest.mark.parametrize(
        "name, suite_id",
        [
            ("TLS_RSA_WITH_AES_128_CBC_SHA", 0x002F),
            ("AES128-SHA", 0x002F),
            ("tls_rsa_with_aes_128_cbc_sha", 0x002F),
            ("aes128-sha", 0x002F),
            ("ECDHE-RSA-AES256-GCM-SHA384", 0xC030),
            ("TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384", 0xC030),
            ("TLS_AES_128_CCM_8_SHA256", 0x1305),
            ("TLS_PSK_DHE_WITH_AES_128_CCM_8", 0xC0AA),
            ("DHE-PSK-AES128-CCM8", 0xC0AA),
            ("ECDHE-ECDSA-CHACHA20-POLY1305", 0xCCA9),
            ("ECDH-CAMELLIA256-GCM-SHA384", 0xC08D),
            (b"AES256-SHA", 0x0035),
        ],
    )
    def test_known_names(self, name, suite_id):
        assert lookup_id(name) == suite_id

    @pytest.mark.parametrize(
        "name",
        [
            "",
            b"",
            "BAD-NAME",
            "AES128-MD5",  # fragments known, no such suite
            "TLS_RSA_WITH_AES_128_CBC",
            "DES-CBC3-SHA",
            "TLS_ECDHE_ECDSA_WITH_CAMELLIA_128_CBC_SHA256_SHA",
        ],
    )
    def test_unresolved_names_give_sentinel(self, name):
        assert lookup_id(name) == UNKNOWN_SUITE_ID == 0

    def test_repeatable(self):
        assert [lookup_id("AES128-SHA") for _ in range(3)] == [0x002F] * 3


class TestLookupName:
    """IANA id to name."""

    def test_prefer_rfc(self):
        assert lookup_name(0x002F, prefer_rfc=True) == SuiteName("TLS_RSA_WITH_AES_128_CBC_SHA", True)

    def test_prefer_alias(self):
        assert lookup_name(0x002F, prefer_rfc=False) == SuiteName("AES128-SHA", True)

    @pytest.mark.parametrize(
        "suite_id, rfc, alias",
        [
            (0xC030, "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384", "ECDHE-RSA-AES256-GCM-SHA384"),
            (0xCCA8, "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256", "ECDHE-RSA-CHACHA20-POLY1305"),
            (0xC0AB, "TLS_PSK_DHE_WITH_AES_256_CCM_8", "DHE-PSK-AES256-CCM8"),
        ],
    )
    def test_both_spellings(self, suite_id, rfc, alias):
        assert lookup_name(suite_id, prefer_rfc=True).text == rfc
        assert lookup_name(suite_id, prefer_rfc=False).text == alias

    def test_alias_falls_back_to_rfc(self):
        """TLS 1.3 suites have no alias; the IANA spelling is used instead."""
        assert lookup_name(0x1301, prefer_rfc=False) == SuiteName("TLS_AES_128_GCM_SHA256", True)

    def test_unknown_id_placeholder(self):
        assert lookup_name(0xFFFF) == SuiteName("TLS_UNKNOWN_0xFFFF", False)

    @pytest.mark.parametrize(
        "suite_id, text",
        [(0x0000, "TLS_UNKNOWN_0x0000"), (0x00FF, "TLS_UNKNOWN_0x00FF"), (0xABCD, "TLS_UNKNOWN_0xABCD")],
    )
    def test_placeholder_format(self, suite_id, text):
        result = lookup_name(suite_id, prefer_rfc=False)
        assert result.text == text
        assert not result.ok

    def test_name_too_long_gives_placeholder(self):
        result = lookup_name(0x002F, max_len=10, prefer_rfc=True)
        assert result == SuiteName("TLS_UNKNOW", False)

    def test_exact_fit(self):
        assert lookup_name(0x002F, max_len=10, prefer_rfc=False) == SuiteName("AES128-SHA", True)

    @pytest.mark.parametrize("max_len", [0, -1, -20])
    def test_no_capacity_gives_empty_placeholder(self, max_len):
        assert lookup_name(0x002F, max_len=max_len) == SuiteName("", False)
        assert lookup_name(0xFFFF, max_len=max_len) == SuiteName("", False)

    def test_defaults_follow_config(self, monkeypatch):
        monkeypatch.setitem(CONFIG, "PREFER_RFC_NAMES", False)
        assert lookup_name(0x0035).text == "AES256-SHA"
        monkeypatch.setitem(CONFIG, "PREFER_RFC_NAMES", True)
        assert lookup_name(0x0035).text == "TLS_RSA_WITH_AES_256_CBC_SHA"
        monkeypatch.setitem(CONFIG, "NAME_MAX_LEN", 5)
        assert lookup_name(0x0035) == SuiteName("TLS_U", False)

    def test_name_resolves_back(self):
        for prefer_rfc in (True, False):
            assert lookup_id(lookup_name(0xC02B, prefer_rfc=prefer_rfc).text) == 0xC02B
