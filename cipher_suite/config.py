"""
Runtime configuration for the cipher suite codec.

Single source of truth for output limits, synonym preference and logging knobs.
Every key can be overridden by an environment variable named CIPHER_SUITE_<KEY>.
"""

import os
from typing import Dict, Any


# Characters that delimit entries of a cipher list string.
LIST_SEPARATORS = " \t:,;"


# Default configuration - all required keys with correct types
CONFIG = {
    # Capacity (characters) of a reconstructed suite name. The longest
    # spelling in the table is well below this.
    "NAME_MAX_LEN": 64,

    # True -> prefer IANA "TLS_..." spellings, False -> OpenSSL-style aliases
    "PREFER_RFC_NAMES": True,

    # Joiner used when rendering a list of suite ids back to a cipher list
    "CIPHER_LIST_SEPARATOR": ":",

    # Level applied to loggers handed out by logging_utils.get_logger
    "LOG_LEVEL": "WARNING",

    # Emit a warning for every cipher list entry that does not resolve
    "LOG_UNKNOWN_CIPHERS": True,
}


# Required keys with their expected types
_REQUIRED_KEYS = {
    "NAME_MAX_LEN": int,
    "PREFER_RFC_NAMES": bool,
    "CIPHER_LIST_SEPARATOR": str,
    "LOG_LEVEL": str,
    "LOG_UNKNOWN_CIPHERS": bool,
}

# Keys that can be overridden by environment variables
_ENV_OVERRIDABLE = set(_REQUIRED_KEYS)
_ENV_PREFIX = "CIPHER_SUITE_"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def validate_config(cfg: Dict[str, Any]) -> None:
    """
    Ensure all required keys exist with correct types/ranges.
    Raise NotImplementedError("<reason>") on any violation.
    No return value on success.
    """
    missing_keys = set(_REQUIRED_KEYS.keys()) - set(cfg.keys())
    if missing_keys:
        raise NotImplementedError(f"CONFIG missing required keys: {', '.join(sorted(missing_keys))}")

    for key, expected_type in _REQUIRED_KEYS.items():
        value = cfg[key]
        # bool is a subclass of int; keep the two apart
        if expected_type is int and isinstance(value, bool):
            raise NotImplementedError(f"CONFIG[{key}] must be int, got bool")
        if not isinstance(value, expected_type):
            raise NotImplementedError(f"CONFIG[{key}] must be {expected_type.__name__}, got {type(value).__name__}")

    if not (1 <= cfg["NAME_MAX_LEN"] <= 255):
        raise NotImplementedError(f"CONFIG[NAME_MAX_LEN] must be 1..255, got {cfg['NAME_MAX_LEN']}")

    sep = cfg["CIPHER_LIST_SEPARATOR"]
    if len(sep) != 1 or sep not in LIST_SEPARATORS:
        raise NotImplementedError(
            f"CONFIG[CIPHER_LIST_SEPARATOR] must be one of {LIST_SEPARATORS!r}, got {sep!r}"
        )

    if cfg["LOG_LEVEL"].upper() not in _LOG_LEVELS:
        raise NotImplementedError(f"CONFIG[LOG_LEVEL] must be one of {sorted(_LOG_LEVELS)}, got {cfg['LOG_LEVEL']!r}")


def _apply_env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to config."""
    result = cfg.copy()

    for key in _ENV_OVERRIDABLE:
        env_var = _ENV_PREFIX + key
        if env_var in os.environ:
            env_value = os.environ[env_var]
            expected_type = _REQUIRED_KEYS[key]

            try:
                if expected_type == int:
                    result[key] = int(env_value, 0)
                elif expected_type == str:
                    result[key] = str(env_value)
                elif expected_type == bool:
                    lowered = str(env_value).strip().lower()
                    if lowered in {"1", "true", "yes", "on"}:
                        result[key] = True
                    elif lowered in {"0", "false", "no", "off"}:
                        result[key] = False
                    else:
                        raise ValueError(f"invalid boolean literal: {env_value}")
                else:
                    raise NotImplementedError(f"Unsupported type for env override: {expected_type}")
            except ValueError:
                raise NotImplementedError(f"Invalid {expected_type.__name__} value for {env_var}: {env_value}")

    return result


# Apply environment overrides and validate
CONFIG = _apply_env_overrides(CONFIG)
validate_config(CONFIG)
