"""Static cipher suite table.

Each entry pairs an IANA suite id with one spelling of its name. Most ids have
two entries, the IANA "TLS_..." spelling first and the OpenSSL-style alias
second; TLS 1.3 suites only have the IANA spelling. Spellings are compiled to
6-byte suite keys once at import, so a typo here fails the import.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Tuple

from .codec import KEY_LEN, encode_name
from .fragments import TLS_INDEX


@dataclass(frozen=True)
class SuiteEntry:
    suite_id: int
    key: bytes

    def __post_init__(self):
        if not isinstance(self.suite_id, int) or not (0 < self.suite_id <= 0xFFFF):
            raise NotImplementedError(f"suite_id must be int in range 1-65535, got {self.suite_id!r}")
        if len(self.key) != KEY_LEN:
            raise NotImplementedError(f"suite key must be {KEY_LEN} bytes")

    @property
    def is_rfc(self) -> bool:
        """True when the entry spells the IANA "TLS_..." name."""
        return self.key[0] >> 2 == TLS_INDEX


_SPELLINGS: Tuple[Tuple[int, str], ...] = (
    # AES and CHACHA20-POLY1305 with RSA and (EC)DH(E) key exchange
    (0x002F, "TLS_RSA_WITH_AES_128_CBC_SHA"),
    (0x002F, "AES128-SHA"),
    (0x0035, "TLS_RSA_WITH_AES_256_CBC_SHA"),
    (0x0035, "AES256-SHA"),
    (0x003C, "TLS_RSA_WITH_AES_128_CBC_SHA256"),
    (0x003C, "AES128-SHA256"),
    (0x003D, "TLS_RSA_WITH_AES_256_CBC_SHA256"),
    (0x003D, "AES256-SHA256"),
    (0x009C, "TLS_RSA_WITH_AES_128_GCM_SHA256"),
    (0x009C, "AES128-GCM-SHA256"),
    (0x009D, "TLS_RSA_WITH_AES_256_GCM_SHA384"),
    (0x009D, "AES256-GCM-SHA384"),
    (0xC004, "TLS_ECDH_ECDSA_WITH_AES_128_CBC_SHA"),
    (0xC004, "ECDH-ECDSA-AES128-SHA"),
    (0xC005, "TLS_ECDH_ECDSA_WITH_AES_256_CBC_SHA"),
    (0xC005, "ECDH-ECDSA-AES256-SHA"),
    (0xC009, "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA"),
    (0xC009, "ECDHE-ECDSA-AES128-SHA"),
    (0xC00A, "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA"),
    (0xC00A, "ECDHE-ECDSA-AES256-SHA"),
    (0xC00E, "TLS_ECDH_RSA_WITH_AES_128_CBC_SHA"),
    (0xC00E, "ECDH-RSA-AES128-SHA"),
    (0xC00F, "TLS_ECDH_RSA_WITH_AES_256_CBC_SHA"),
    (0xC00F, "ECDH-RSA-AES256-SHA"),
    (0xC013, "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA"),
    (0xC013, "ECDHE-RSA-AES128-SHA"),
    (0xC014, "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA"),
    (0xC014, "ECDHE-RSA-AES256-SHA"),
    (0xC023, "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256"),
    (0xC023, "ECDHE-ECDSA-AES128-SHA256"),
    (0xC024, "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384"),
    (0xC024, "ECDHE-ECDSA-AES256-SHA384"),
    (0xC025, "TLS_ECDH_ECDSA_WITH_AES_128_CBC_SHA256"),
    (0xC025, "ECDH-ECDSA-AES128-SHA256"),
    (0xC026, "TLS_ECDH_ECDSA_WITH_AES_256_CBC_SHA384"),
    (0xC026, "ECDH-ECDSA-AES256-SHA384"),
    (0xC027, "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256"),
    (0xC027, "ECDHE-RSA-AES128-SHA256"),
    (0xC028, "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384"),
    (0xC028, "ECDHE-RSA-AES256-SHA384"),
    (0xC029, "TLS_ECDH_RSA_WITH_AES_128_CBC_SHA256"),
    (0xC029, "ECDH-RSA-AES128-SHA256"),
    (0xC02A, "TLS_ECDH_RSA_WITH_AES_256_CBC_SHA384"),
    (0xC02A, "ECDH-RSA-AES256-SHA384"),
    (0xC02B, "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256"),
    (0xC02B, "ECDHE-ECDSA-AES128-GCM-SHA256"),
    (0xC02C, "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384"),
    (0xC02C, "ECDHE-ECDSA-AES256-GCM-SHA384"),
    (0xC02D, "TLS_ECDH_ECDSA_WITH_AES_128_GCM_SHA256"),
    (0xC02D, "ECDH-ECDSA-AES128-GCM-SHA256"),
    (0xC02E, "TLS_ECDH_ECDSA_WITH_AES_256_GCM_SHA384"),
    (0xC02E, "ECDH-ECDSA-AES256-GCM-SHA384"),
    (0xC02F, "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256"),
    (0xC02F, "ECDHE-RSA-AES128-GCM-SHA256"),
    (0xC030, "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384"),
    (0xC030, "ECDHE-RSA-AES256-GCM-SHA384"),
    (0xC031, "TLS_ECDH_RSA_WITH_AES_128_GCM_SHA256"),
    (0xC031, "ECDH-RSA-AES128-GCM-SHA256"),
    (0xC032, "TLS_ECDH_RSA_WITH_AES_256_GCM_SHA384"),
    (0xC032, "ECDH-RSA-AES256-GCM-SHA384"),
    (0xCCA8, "TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCA8, "ECDHE-RSA-CHACHA20-POLY1305"),
    (0xCCA9, "TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCA9, "ECDHE-ECDSA-CHACHA20-POLY1305"),

    # NULL ciphers and PSK variants
    (0x0001, "TLS_RSA_WITH_NULL_MD5"),
    (0x0001, "NULL-MD5"),
    (0x0002, "TLS_RSA_WITH_NULL_SHA"),
    (0x0002, "NULL-SHA"),
    (0x002C, "TLS_PSK_WITH_NULL_SHA"),
    (0x002C, "PSK-NULL-SHA"),
    (0x002D, "TLS_DHE_PSK_WITH_NULL_SHA"),
    (0x002D, "DHE-PSK-NULL-SHA"),
    (0x002E, "TLS_RSA_PSK_WITH_NULL_SHA"),
    (0x002E, "RSA-PSK-NULL-SHA"),
    (0x0033, "TLS_DHE_RSA_WITH_AES_128_CBC_SHA"),
    (0x0033, "DHE-RSA-AES128-SHA"),
    (0x0039, "TLS_DHE_RSA_WITH_AES_256_CBC_SHA"),
    (0x0039, "DHE-RSA-AES256-SHA"),
    (0x003B, "TLS_RSA_WITH_NULL_SHA256"),
    (0x003B, "NULL-SHA256"),
    (0x0067, "TLS_DHE_RSA_WITH_AES_128_CBC_SHA256"),
    (0x0067, "DHE-RSA-AES128-SHA256"),
    (0x006B, "TLS_DHE_RSA_WITH_AES_256_CBC_SHA256"),
    (0x006B, "DHE-RSA-AES256-SHA256"),
    (0x008C, "TLS_PSK_WITH_AES_128_CBC_SHA"),
    (0x008C, "PSK-AES128-CBC-SHA"),
    (0x008D, "TLS_PSK_WITH_AES_256_CBC_SHA"),
    (0x008D, "PSK-AES256-CBC-SHA"),
    (0x0090, "TLS_DHE_PSK_WITH_AES_128_CBC_SHA"),
    (0x0090, "DHE-PSK-AES128-CBC-SHA"),
    (0x0091, "TLS_DHE_PSK_WITH_AES_256_CBC_SHA"),
    (0x0091, "DHE-PSK-AES256-CBC-SHA"),
    (0x0094, "TLS_RSA_PSK_WITH_AES_128_CBC_SHA"),
    (0x0094, "RSA-PSK-AES128-CBC-SHA"),
    (0x0095, "TLS_RSA_PSK_WITH_AES_256_CBC_SHA"),
    (0x0095, "RSA-PSK-AES256-CBC-SHA"),
    (0x009E, "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256"),
    (0x009E, "DHE-RSA-AES128-GCM-SHA256"),
    (0x009F, "TLS_DHE_RSA_WITH_AES_256_GCM_SHA384"),
    (0x009F, "DHE-RSA-AES256-GCM-SHA384"),
    (0x00A8, "TLS_PSK_WITH_AES_128_GCM_SHA256"),
    (0x00A8, "PSK-AES128-GCM-SHA256"),
    (0x00A9, "TLS_PSK_WITH_AES_256_GCM_SHA384"),
    (0x00A9, "PSK-AES256-GCM-SHA384"),
    (0x00AA, "TLS_DHE_PSK_WITH_AES_128_GCM_SHA256"),
    (0x00AA, "DHE-PSK-AES128-GCM-SHA256"),
    (0x00AB, "TLS_DHE_PSK_WITH_AES_256_GCM_SHA384"),
    (0x00AB, "DHE-PSK-AES256-GCM-SHA384"),
    (0x00AC, "TLS_RSA_PSK_WITH_AES_128_GCM_SHA256"),
    (0x00AC, "RSA-PSK-AES128-GCM-SHA256"),
    (0x00AD, "TLS_RSA_PSK_WITH_AES_256_GCM_SHA384"),
    (0x00AD, "RSA-PSK-AES256-GCM-SHA384"),
    (0x00AE, "TLS_PSK_WITH_AES_128_CBC_SHA256"),
    (0x00AE, "PSK-AES128-CBC-SHA256"),
    (0x00AF, "TLS_PSK_WITH_AES_256_CBC_SHA384"),
    (0x00AF, "PSK-AES256-CBC-SHA384"),
    (0x00B0, "TLS_PSK_WITH_NULL_SHA256"),
    (0x00B0, "PSK-NULL-SHA256"),
    (0x00B1, "TLS_PSK_WITH_NULL_SHA384"),
    (0x00B1, "PSK-NULL-SHA384"),
    (0x00B2, "TLS_DHE_PSK_WITH_AES_128_CBC_SHA256"),
    (0x00B2, "DHE-PSK-AES128-CBC-SHA256"),
    (0x00B3, "TLS_DHE_PSK_WITH_AES_256_CBC_SHA384"),
    (0x00B3, "DHE-PSK-AES256-CBC-SHA384"),
    (0x00B4, "TLS_DHE_PSK_WITH_NULL_SHA256"),
    (0x00B4, "DHE-PSK-NULL-SHA256"),
    (0x00B5, "TLS_DHE_PSK_WITH_NULL_SHA384"),
    (0x00B5, "DHE-PSK-NULL-SHA384"),
    (0x00B6, "TLS_RSA_PSK_WITH_AES_128_CBC_SHA256"),
    (0x00B6, "RSA-PSK-AES128-CBC-SHA256"),
    (0x00B7, "TLS_RSA_PSK_WITH_AES_256_CBC_SHA384"),
    (0x00B7, "RSA-PSK-AES256-CBC-SHA384"),
    (0x00B8, "TLS_RSA_PSK_WITH_NULL_SHA256"),
    (0x00B8, "RSA-PSK-NULL-SHA256"),
    (0x00B9, "TLS_RSA_PSK_WITH_NULL_SHA384"),
    (0x00B9, "RSA-PSK-NULL-SHA384"),
    # TLS 1.3, IANA spelling only
    (0x1301, "TLS_AES_128_GCM_SHA256"),
    (0x1302, "TLS_AES_256_GCM_SHA384"),
    (0x1303, "TLS_CHACHA20_POLY1305_SHA256"),
    (0x1304, "TLS_AES_128_CCM_SHA256"),
    (0x1305, "TLS_AES_128_CCM_8_SHA256"),
    # EC NULL ciphers and ECDHE-PSK
    (0xC001, "TLS_ECDH_ECDSA_WITH_NULL_SHA"),
    (0xC001, "ECDH-ECDSA-NULL-SHA"),
    (0xC006, "TLS_ECDHE_ECDSA_WITH_NULL_SHA"),
    (0xC006, "ECDHE-ECDSA-NULL-SHA"),
    (0xC00B, "TLS_ECDH_RSA_WITH_NULL_SHA"),
    (0xC00B, "ECDH-RSA-NULL-SHA"),
    (0xC010, "TLS_ECDHE_RSA_WITH_NULL_SHA"),
    (0xC010, "ECDHE-RSA-NULL-SHA"),
    (0xC035, "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA"),
    (0xC035, "ECDHE-PSK-AES128-CBC-SHA"),
    (0xC036, "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA"),
    (0xC036, "ECDHE-PSK-AES256-CBC-SHA"),
    (0xCCAB, "TLS_PSK_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCAB, "PSK-CHACHA20-POLY1305"),

    # AES-CCM
    (0xC09C, "TLS_RSA_WITH_AES_128_CCM"),
    (0xC09C, "AES128-CCM"),
    (0xC09D, "TLS_RSA_WITH_AES_256_CCM"),
    (0xC09D, "AES256-CCM"),
    (0xC0A0, "TLS_RSA_WITH_AES_128_CCM_8"),
    (0xC0A0, "AES128-CCM8"),
    (0xC0A1, "TLS_RSA_WITH_AES_256_CCM_8"),
    (0xC0A1, "AES256-CCM8"),
    (0xC0AC, "TLS_ECDHE_ECDSA_WITH_AES_128_CCM"),
    (0xC0AC, "ECDHE-ECDSA-AES128-CCM"),
    (0xC0AD, "TLS_ECDHE_ECDSA_WITH_AES_256_CCM"),
    (0xC0AD, "ECDHE-ECDSA-AES256-CCM"),
    (0xC0AE, "TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8"),
    (0xC0AE, "ECDHE-ECDSA-AES128-CCM8"),
    (0xC0AF, "TLS_ECDHE_ECDSA_WITH_AES_256_CCM_8"),
    (0xC0AF, "ECDHE-ECDSA-AES256-CCM8"),

    # CAMELLIA, ARIA and the remaining CCM and CHACHA20 suites. Entries tagged
    # "not in OpenSSL" are aliases OpenSSL itself does not define.
    (0x0041, "TLS_RSA_WITH_CAMELLIA_128_CBC_SHA"),
    (0x0041, "CAMELLIA128-SHA"),
    (0x0045, "TLS_DHE_RSA_WITH_CAMELLIA_128_CBC_SHA"),
    (0x0045, "DHE-RSA-CAMELLIA128-SHA"),
    (0x0084, "TLS_RSA_WITH_CAMELLIA_256_CBC_SHA"),
    (0x0084, "CAMELLIA256-SHA"),
    (0x0088, "TLS_DHE_RSA_WITH_CAMELLIA_256_CBC_SHA"),
    (0x0088, "DHE-RSA-CAMELLIA256-SHA"),
    (0x00BA, "TLS_RSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0x00BA, "CAMELLIA128-SHA256"),
    (0x00BE, "TLS_DHE_RSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0x00BE, "DHE-RSA-CAMELLIA128-SHA256"),
    (0x00C0, "TLS_RSA_WITH_CAMELLIA_256_CBC_SHA256"),
    (0x00C0, "CAMELLIA256-SHA256"),
    (0x00C4, "TLS_DHE_RSA_WITH_CAMELLIA_256_CBC_SHA256"),
    (0x00C4, "DHE-RSA-CAMELLIA256-SHA256"),
    (0xC037, "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA256"),
    (0xC037, "ECDHE-PSK-AES128-CBC-SHA256"),
    (0xC038, "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA384"),
    (0xC038, "ECDHE-PSK-AES256-CBC-SHA384"),
    (0xC039, "TLS_ECDHE_PSK_WITH_NULL_SHA"),
    (0xC039, "ECDHE-PSK-NULL-SHA"),
    (0xC03A, "TLS_ECDHE_PSK_WITH_NULL_SHA256"),
    (0xC03A, "ECDHE-PSK-NULL-SHA256"),
    (0xC03B, "TLS_ECDHE_PSK_WITH_NULL_SHA384"),
    (0xC03B, "ECDHE-PSK-NULL-SHA384"),
    (0xC03C, "TLS_RSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC03C, "ARIA128-SHA256"),  # not in OpenSSL
    (0xC03D, "TLS_RSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC03D, "ARIA256-SHA384"),  # not in OpenSSL
    (0xC044, "TLS_DHE_RSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC044, "DHE-RSA-ARIA128-SHA256"),  # not in OpenSSL
    (0xC045, "TLS_DHE_RSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC045, "DHE-RSA-ARIA256-SHA384"),  # not in OpenSSL
    (0xC048, "TLS_ECDHE_ECDSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC048, "ECDHE-ECDSA-ARIA128-SHA256"),  # not in OpenSSL
    (0xC049, "TLS_ECDHE_ECDSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC049, "ECDHE-ECDSA-ARIA256-SHA384"),  # not in OpenSSL
    (0xC04A, "TLS_ECDH_ECDSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC04A, "ECDH-ECDSA-ARIA128-SHA256"),  # not in OpenSSL
    (0xC04B, "TLS_ECDH_ECDSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC04B, "ECDH-ECDSA-ARIA256-SHA384"),  # not in OpenSSL
    (0xC04C, "TLS_ECDHE_RSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC04C, "ECDHE-ARIA128-SHA256"),  # not in OpenSSL
    (0xC04D, "TLS_ECDHE_RSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC04D, "ECDHE-ARIA256-SHA384"),  # not in OpenSSL
    (0xC04E, "TLS_ECDH_RSA_WITH_ARIA_128_CBC_SHA256"),
    (0xC04E, "ECDH-ARIA128-SHA256"),  # not in OpenSSL
    (0xC04F, "TLS_ECDH_RSA_WITH_ARIA_256_CBC_SHA384"),
    (0xC04F, "ECDH-ARIA256-SHA384"),  # not in OpenSSL
    (0xC050, "TLS_RSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC050, "ARIA128-GCM-SHA256"),
    (0xC051, "TLS_RSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC051, "ARIA256-GCM-SHA384"),
    (0xC052, "TLS_DHE_RSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC052, "DHE-RSA-ARIA128-GCM-SHA256"),
    (0xC053, "TLS_DHE_RSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC053, "DHE-RSA-ARIA256-GCM-SHA384"),
    (0xC05C, "TLS_ECDHE_ECDSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC05C, "ECDHE-ECDSA-ARIA128-GCM-SHA256"),
    (0xC05D, "TLS_ECDHE_ECDSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC05D, "ECDHE-ECDSA-ARIA256-GCM-SHA384"),
    (0xC05E, "TLS_ECDH_ECDSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC05E, "ECDH-ECDSA-ARIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC05F, "TLS_ECDH_ECDSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC05F, "ECDH-ECDSA-ARIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC060, "TLS_ECDHE_RSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC060, "ECDHE-ARIA128-GCM-SHA256"),
    (0xC061, "TLS_ECDHE_RSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC061, "ECDHE-ARIA256-GCM-SHA384"),
    (0xC062, "TLS_ECDH_RSA_WITH_ARIA_128_GCM_SHA256"),
    (0xC062, "ECDH-ARIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC063, "TLS_ECDH_RSA_WITH_ARIA_256_GCM_SHA384"),
    (0xC063, "ECDH-ARIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC064, "TLS_PSK_WITH_ARIA_128_CBC_SHA256"),
    (0xC064, "PSK-ARIA128-SHA256"),  # not in OpenSSL
    (0xC065, "TLS_PSK_WITH_ARIA_256_CBC_SHA384"),
    (0xC065, "PSK-ARIA256-SHA384"),  # not in OpenSSL
    (0xC066, "TLS_DHE_PSK_WITH_ARIA_128_CBC_SHA256"),
    (0xC066, "DHE-PSK-ARIA128-SHA256"),  # not in OpenSSL
    (0xC067, "TLS_DHE_PSK_WITH_ARIA_256_CBC_SHA384"),
    (0xC067, "DHE-PSK-ARIA256-SHA384"),  # not in OpenSSL
    (0xC068, "TLS_RSA_PSK_WITH_ARIA_128_CBC_SHA256"),
    (0xC068, "RSA-PSK-ARIA128-SHA256"),  # not in OpenSSL
    (0xC069, "TLS_RSA_PSK_WITH_ARIA_256_CBC_SHA384"),
    (0xC069, "RSA-PSK-ARIA256-SHA384"),  # not in OpenSSL
    (0xC06A, "TLS_PSK_WITH_ARIA_128_GCM_SHA256"),
    (0xC06A, "PSK-ARIA128-GCM-SHA256"),
    (0xC06B, "TLS_PSK_WITH_ARIA_256_GCM_SHA384"),
    (0xC06B, "PSK-ARIA256-GCM-SHA384"),
    (0xC06C, "TLS_DHE_PSK_WITH_ARIA_128_GCM_SHA256"),
    (0xC06C, "DHE-PSK-ARIA128-GCM-SHA256"),
    (0xC06D, "TLS_DHE_PSK_WITH_ARIA_256_GCM_SHA384"),
    (0xC06D, "DHE-PSK-ARIA256-GCM-SHA384"),
    (0xC06E, "TLS_RSA_PSK_WITH_ARIA_128_GCM_SHA256"),
    (0xC06E, "RSA-PSK-ARIA128-GCM-SHA256"),
    (0xC06F, "TLS_RSA_PSK_WITH_ARIA_256_GCM_SHA384"),
    (0xC06F, "RSA-PSK-ARIA256-GCM-SHA384"),
    (0xC070, "TLS_ECDHE_PSK_WITH_ARIA_128_CBC_SHA256"),
    (0xC070, "ECDHE-PSK-ARIA128-SHA256"),  # not in OpenSSL
    (0xC071, "TLS_ECDHE_PSK_WITH_ARIA_256_CBC_SHA384"),
    (0xC071, "ECDHE-PSK-ARIA256-SHA384"),  # not in OpenSSL
    (0xC072, "TLS_ECDHE_ECDSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC072, "ECDHE-ECDSA-CAMELLIA128-SHA256"),
    (0xC073, "TLS_ECDHE_ECDSA_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC073, "ECDHE-ECDSA-CAMELLIA256-SHA384"),
    (0xC074, "TLS_ECDH_ECDSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC074, "ECDH-ECDSA-CAMELLIA128-SHA256"),  # not in OpenSSL
    (0xC075, "TLS_ECDH_ECDSA_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC075, "ECDH-ECDSA-CAMELLIA256-SHA384"),  # not in OpenSSL
    (0xC076, "TLS_ECDHE_RSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC076, "ECDHE-RSA-CAMELLIA128-SHA256"),
    (0xC077, "TLS_ECDHE_RSA_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC077, "ECDHE-RSA-CAMELLIA256-SHA384"),
    (0xC078, "TLS_ECDH_RSA_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC078, "ECDH-CAMELLIA128-SHA256"),  # not in OpenSSL
    (0xC079, "TLS_ECDH_RSA_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC079, "ECDH-CAMELLIA256-SHA384"),  # not in OpenSSL
    (0xC07A, "TLS_RSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC07A, "CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC07B, "TLS_RSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC07B, "CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC07C, "TLS_DHE_RSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC07C, "DHE-RSA-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC07D, "TLS_DHE_RSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC07D, "DHE-RSA-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC086, "TLS_ECDHE_ECDSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC086, "ECDHE-ECDSA-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC087, "TLS_ECDHE_ECDSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC087, "ECDHE-ECDSA-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC088, "TLS_ECDH_ECDSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC088, "ECDH-ECDSA-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC089, "TLS_ECDH_ECDSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC089, "ECDH-ECDSA-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC08A, "TLS_ECDHE_RSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC08A, "ECDHE-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC08B, "TLS_ECDHE_RSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC08B, "ECDHE-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC08C, "TLS_ECDH_RSA_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC08C, "ECDH-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC08D, "TLS_ECDH_RSA_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC08D, "ECDH-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC08E, "TLS_PSK_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC08E, "PSK-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC08F, "TLS_PSK_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC08F, "PSK-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC090, "TLS_DHE_PSK_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC090, "DHE-PSK-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC091, "TLS_DHE_PSK_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC091, "DHE-PSK-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC092, "TLS_RSA_PSK_WITH_CAMELLIA_128_GCM_SHA256"),
    (0xC092, "RSA-PSK-CAMELLIA128-GCM-SHA256"),  # not in OpenSSL
    (0xC093, "TLS_RSA_PSK_WITH_CAMELLIA_256_GCM_SHA384"),
    (0xC093, "RSA-PSK-CAMELLIA256-GCM-SHA384"),  # not in OpenSSL
    (0xC094, "TLS_PSK_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC094, "PSK-CAMELLIA128-SHA256"),
    (0xC095, "TLS_PSK_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC095, "PSK-CAMELLIA256-SHA384"),
    (0xC096, "TLS_DHE_PSK_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC096, "DHE-PSK-CAMELLIA128-SHA256"),
    (0xC097, "TLS_DHE_PSK_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC097, "DHE-PSK-CAMELLIA256-SHA384"),
    (0xC098, "TLS_RSA_PSK_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC098, "RSA-PSK-CAMELLIA128-SHA256"),
    (0xC099, "TLS_RSA_PSK_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC099, "RSA-PSK-CAMELLIA256-SHA384"),
    (0xC09A, "TLS_ECDHE_PSK_WITH_CAMELLIA_128_CBC_SHA256"),
    (0xC09A, "ECDHE-PSK-CAMELLIA128-SHA256"),
    (0xC09B, "TLS_ECDHE_PSK_WITH_CAMELLIA_256_CBC_SHA384"),
    (0xC09B, "ECDHE-PSK-CAMELLIA256-SHA384"),
    (0xC09E, "TLS_DHE_RSA_WITH_AES_128_CCM"),
    (0xC09E, "DHE-RSA-AES128-CCM"),
    (0xC09F, "TLS_DHE_RSA_WITH_AES_256_CCM"),
    (0xC09F, "DHE-RSA-AES256-CCM"),
    (0xC0A2, "TLS_DHE_RSA_WITH_AES_128_CCM_8"),
    (0xC0A2, "DHE-RSA-AES128-CCM8"),
    (0xC0A3, "TLS_DHE_RSA_WITH_AES_256_CCM_8"),
    (0xC0A3, "DHE-RSA-AES256-CCM8"),
    (0xC0A4, "TLS_PSK_WITH_AES_128_CCM"),
    (0xC0A4, "PSK-AES128-CCM"),
    (0xC0A5, "TLS_PSK_WITH_AES_256_CCM"),
    (0xC0A5, "PSK-AES256-CCM"),
    (0xC0A6, "TLS_DHE_PSK_WITH_AES_128_CCM"),
    (0xC0A6, "DHE-PSK-AES128-CCM"),
    (0xC0A7, "TLS_DHE_PSK_WITH_AES_256_CCM"),
    (0xC0A7, "DHE-PSK-AES256-CCM"),
    (0xC0A8, "TLS_PSK_WITH_AES_128_CCM_8"),
    (0xC0A8, "PSK-AES128-CCM8"),
    (0xC0A9, "TLS_PSK_WITH_AES_256_CCM_8"),
    (0xC0A9, "PSK-AES256-CCM8"),
    (0xC0AA, "TLS_PSK_DHE_WITH_AES_128_CCM_8"),
    (0xC0AA, "DHE-PSK-AES128-CCM8"),
    (0xC0AB, "TLS_PSK_DHE_WITH_AES_256_CCM_8"),
    (0xC0AB, "DHE-PSK-AES256-CCM8"),
    (0xCCAA, "TLS_DHE_RSA_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCAA, "DHE-RSA-CHACHA20-POLY1305"),
    (0xCCAC, "TLS_ECDHE_PSK_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCAC, "ECDHE-PSK-CHACHA20-POLY1305"),
    (0xCCAD, "TLS_DHE_PSK_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCAD, "DHE-PSK-CHACHA20-POLY1305"),
    (0xCCAE, "TLS_RSA_PSK_WITH_CHACHA20_POLY1305_SHA256"),
    (0xCCAE, "RSA-PSK-CHACHA20-POLY1305"),
)


def _build_table() -> Tuple[SuiteEntry, ...]:
    return tuple(SuiteEntry(suite_id, encode_name(name)) for suite_id, name in _SPELLINGS)


SUITE_TABLE = _build_table()


def _build_id_index() -> MappingProxyType:
    index: Dict[int, Tuple[SuiteEntry, ...]] = {}
    for entry in SUITE_TABLE:
        index[entry.suite_id] = index.get(entry.suite_id, ()) + (entry,)
    return MappingProxyType(index)


# Entries per id, table order preserved
SUITES_BY_ID = _build_id_index()
