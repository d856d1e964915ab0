"""Parsing for the Redis INFO report.

INFO replies are line-oriented ``field:value`` pairs separated by CRLF, with
``# Section`` headers and blank lines between sections::

    # Server
    redis_version:7.0.0
    # Clients
    connected_clients:3

redis-py already parses the reply into a dict (with nested dicts for
keyspace lines such as ``db0:keys=1,expires=0``). ``normalize_info`` accepts
either shape and always returns a flat mapping.
"""

from collections.abc import Mapping
from typing import Any

from mockmate_cache.domain.protocols import InfoValue


def parse_info(raw: str) -> dict[str, InfoValue]:
    """Parse a raw INFO report into a flat mapping.

    Lines without a colon (section headers, blanks) are skipped. Each value
    becomes an int or float when it parses as a number, otherwise it stays a
    string. Version fields (``redis_version``, ``lua_version`` ...) always
    stay strings.

    Args:
        raw: INFO reply text.

    Returns:
        Mapping of field name to value; empty when no field lines are present.
    """
    parsed: dict[str, InfoValue] = {}
    for line in raw.splitlines():
        if not line or line.startswith("#") or ":" not in line:
            continue
        field, _, value = line.partition(":")
        parsed[field] = value if _is_version_field(field) else coerce_value(value)
    return parsed


def normalize_info(raw: str | bytes | Mapping[str, Any]) -> dict[str, InfoValue]:
    """Flatten an INFO reply in whatever shape the client returned it.

    Args:
        raw: INFO text, bytes, or the dict produced by redis-py.

    Returns:
        Flat mapping of field name to value.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return parse_info(raw)

    flat: dict[str, InfoValue] = {}
    for field, value in raw.items():
        if isinstance(value, Mapping):
            flat[str(field)] = ",".join(f"{k}={v}" for k, v in value.items())
        elif _is_version_field(str(field)):
            flat[str(field)] = str(value)
        elif isinstance(value, bool):
            flat[str(field)] = int(value)
        elif isinstance(value, (int, float)):
            flat[str(field)] = value
        else:
            flat[str(field)] = coerce_value(str(value))
    return flat


def coerce_value(value: str) -> InfoValue:
    """Convert a numeric string to int/float, leave anything else as is."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def _is_version_field(field: str) -> bool:
    # "7.2" would otherwise become the float 7.2
    return field.endswith("_version")
