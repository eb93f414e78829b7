"""
Tests for suite key packing and the name <-> key codec.
"""

import pytest

from cipher_suite.codec import (
    KEY_LEN,
    decode_key,
    encode_name,
    pack_indices,
    separator_for,
    unpack_key,
)
from cipher_suite.errors import CipherSuiteError, CorruptKey, MalformedName, NameTooLong, UnknownFragment
from cipher_suite.fragments import index_of

# TLS=1 RSA=26 WITH=2 AES=7 128=3 CBC=10 SHA=27
RSA_AES128_SHA_KEY = bytes.fromhex("05a0870ca6c0")


class TestPacking:
    """Bit layout of the 6-byte suite key."""

    def test_known_layout(self):
        indices = [index_of(t) for t in ("TLS", "RSA", "WITH", "AES", "128", "CBC", "SHA")]
        assert indices == [1, 26, 2, 7, 3, 10, 27]
        assert pack_indices(indices) == RSA_AES128_SHA_KEY

    def test_unpack_known_layout(self):
        assert unpack_key(RSA_AES128_SHA_KEY) == (1, 26, 2, 7, 3, 10, 27, 0)

    def test_all_bits_set(self):
        assert pack_indices([63] * 8) == b"\xff" * KEY_LEN
        assert unpack_key(b"\xff" * KEY_LEN) == (63,) * 8

    def test_pad_with_zero(self):
        key = pack_indices([8, 27])
        assert len(key) == KEY_LEN
        assert unpack_key(key) == (8, 27, 0, 0, 0, 0, 0, 0)
        assert key[3:] == b"\x00\x00\x00"

    def test_groups_are_independent(self):
        """Indices 4-7 land only in bytes 3-5."""
        key = pack_indices([0, 0, 0, 0, 63, 1, 62, 5])
        assert key[:3] == b"\x00\x00\x00"
        assert unpack_key(key)[4:] == (63, 1, 62, 5)

    def test_too_many_indices(self):
        with pytest.raises(MalformedName):
            pack_indices([1] * 9)

    @pytest.mark.parametrize("key", [b"", b"\x00" * 5, b"\x00" * 7])
    def test_unpack_rejects_wrong_length(self, key):
        with pytest.raises(CorruptKey, match="6 bytes"):
            unpack_key(key)


class TestEncodeName:
    """Forward codec: spelling to suite key."""

    def test_rfc_spelling(self):
        assert encode_name("TLS_RSA_WITH_AES_128_CBC_SHA") == RSA_AES128_SHA_KEY

    def test_case_insensitive(self):
        assert encode_name("tls_rsa_with_aes_128_cbc_sha") == RSA_AES128_SHA_KEY
        assert encode_name("aes128-sha") == encode_name("AES128-SHA")

    def test_bytes_input(self):
        assert encode_name(b"TLS_RSA_WITH_AES_128_CBC_SHA") == RSA_AES128_SHA_KEY

    def test_alias_spelling(self):
        assert unpack_key(encode_name("AES128-SHA"))[:3] == (index_of("AES128"), index_of("SHA"), 0)

    @pytest.mark.parametrize(
        "name, separator",
        [
            ("TLS_AES_128_GCM_SHA256", "_"),
            ("tls_aes_128_gcm_sha256", "_"),
            ("AES128-SHA", "-"),
            ("ECDHE-RSA-AES128-GCM-SHA256", "-"),
            ("", "-"),
        ],
    )
    def test_separator_inference(self, name, separator):
        assert separator_for(name) == separator

    def test_rfc_prefix_with_hyphens_fails(self):
        """A TLS prefix forces '_' so the hyphenated rest is one unknown field."""
        with pytest.raises(UnknownFragment):
            encode_name("TLS-RSA-WITH-AES-128-CBC-SHA")

    def test_eight_fields_accepted(self):
        key = encode_name("TLS_ECDHE_ECDSA_WITH_CAMELLIA_128_CBC_SHA256")
        assert 0 not in unpack_key(key)

    def test_nine_fields_rejected(self):
        with pytest.raises(MalformedName, match="too many fields"):
            encode_name("TLS_ECDHE_ECDSA_WITH_CAMELLIA_128_CBC_SHA256_SHA")

    @pytest.mark.parametrize(
        "name",
        ["", "AES128-SHA-", "-AES128-SHA", "AES128--SHA", "AES128-SHA1", "TLS_", "FOO"],
    )
    def test_unknown_or_empty_fields(self, name):
        with pytest.raises(UnknownFragment):
            encode_name(name)

    def test_non_ascii_bytes(self):
        with pytest.raises(UnknownFragment, match="non-ASCII"):
            encode_name(b"AES128-\xffSHA")

    def test_nul_terminates_name(self):
        assert encode_name("AES128-SHA\0junk") == encode_name("AES128-SHA")

    def test_errors_share_base_class(self):
        with pytest.raises(CipherSuiteError):
            encode_name("NOT-A-CIPHER")


class TestDecodeKey:
    """Reverse codec: suite key to spelling."""

    def test_rfc_key(self):
        assert decode_key(RSA_AES128_SHA_KEY) == "TLS_RSA_WITH_AES_128_CBC_SHA"

    def test_alias_key(self):
        assert decode_key(encode_name("ecdhe-rsa-aes256-gcm-sha384")) == "ECDHE-RSA-AES256-GCM-SHA384"

    def test_stops_at_first_sentinel(self):
        key = pack_indices([index_of("AES128"), 0, index_of("SHA")])
        assert decode_key(key) == "AES128"

    def test_empty_key(self):
        assert decode_key(b"\x00" * KEY_LEN) == ""

    def test_corrupt_index(self):
        key = pack_indices([index_of("AES128"), 40])
        with pytest.raises(CorruptKey, match="out of range"):
            decode_key(key)

    def test_exact_fit(self):
        name = "TLS_RSA_WITH_AES_128_CBC_SHA"
        assert decode_key(RSA_AES128_SHA_KEY, max_len=len(name)) == name

    def test_too_long(self):
        with pytest.raises(NameTooLong, match="limit is 27"):
            decode_key(RSA_AES128_SHA_KEY, max_len=27)
