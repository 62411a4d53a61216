"""Parameter validation for admin requests.

Every parser takes the raw string from a path segment, query parameter or
request body and returns a typed value, or raises InvalidParameterError (400)
naming the offending input. Nothing here touches the Core Engine, so a
rejected request never reaches it.

Integers follow strict decimal grammar with explicit widths: no surrounding
whitespace, no digit separators, no base prefixes.
"""

import binascii
import math
import re
from datetime import datetime

from src.adm_common.assets import symbol_to_id
from src.adm_common.datetime_utils import from_unix_ms, utc_now
from src.adm_common.errors import (
    EmptyNoticeError,
    InvalidParameterError,
    NoticeTooLargeError,
    PastScheduleError,
    UnknownAssetError,
)

ACCOUNT_ID_SIZE = 32
MATCH_ID_SIZE = 32
MAX_UINT16 = (1 << 16) - 1
MAX_INT64 = (1 << 63) - 1

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_NANOS_PER_DAY = 86_400 * 1_000_000_000


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def parse_bool(raw: str, what: str) -> bool:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise InvalidParameterError(f'invalid {what} boolean "{raw}"')


def parse_int(raw: str, what: str, bits: int = 64) -> int:
    """Signed decimal integer that fits in ``bits`` bits."""
    if not _SIGNED_RE.fullmatch(raw):
        raise InvalidParameterError(f'invalid {what} int "{raw}": invalid syntax')
    value = int(raw)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise InvalidParameterError(f'invalid {what} int "{raw}": value out of range')
    return value


def parse_uint(raw: str, what: str, bits: int = 64) -> int:
    """Unsigned decimal integer that fits in ``bits`` bits."""
    if not _UNSIGNED_RE.fullmatch(raw):
        raise InvalidParameterError(f'error parsing {what} "{raw}": invalid syntax')
    value = int(raw)
    if value >= 1 << bits:
        raise InvalidParameterError(f'error parsing {what} "{raw}": value out of range')
    return value


def parse_float(raw: str, what: str) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidParameterError(f'invalid {what} "{raw}"')
    value = float(raw)
    if not math.isfinite(value):
        raise InvalidParameterError(f'invalid {what} "{raw}"')
    return value


# ---------------------------------------------------------------------------
# Optional query values with documented defaults
# ---------------------------------------------------------------------------


def optional_bool(raw: str | None, what: str, default: bool) -> bool:
    if raw is None or raw == "":
        return default
    return parse_bool(raw, what)


def optional_int(raw: str | None, what: str, default: int) -> int:
    if raw is None or raw == "":
        return default
    return parse_int(raw, what)


def optional_uint(raw: str | None, what: str, default: int, bits: int = 64) -> int:
    if raw is None or raw == "":
        return default
    return parse_uint(raw, what, bits)


def schedule_time(raw: str | None, action: str) -> datetime | None:
    """Unix-millisecond schedule time.

    Absent means "as soon as possible" and returns None. A time strictly
    before now is rejected.
    """
    if raw is None or raw == "":
        return None
    if not _SIGNED_RE.fullmatch(raw):
        raise InvalidParameterError(f'invalid {action} time "{raw}": invalid syntax')
    ms = int(raw)
    if not -MAX_INT64 - 1 <= ms <= MAX_INT64:
        raise InvalidParameterError(f'invalid {action} time "{raw}": value out of range')
    try:
        when = from_unix_ms(ms)
    except (OverflowError, ValueError, OSError) as exc:
        raise InvalidParameterError(f'invalid {action} time "{raw}": {exc}') from exc
    if when < utc_now():
        raise PastScheduleError(action, when.isoformat())
    return when


def bond_lock_seconds(raw: str | None) -> int:
    """Required ``days`` parameter as a lock duration in seconds."""
    if raw is None or raw == "":
        raise InvalidParameterError("no days duration specified")
    days = parse_uint(raw, "days")
    if days == 0:
        raise InvalidParameterError("days parsed to zero")
    if days * _NANOS_PER_DAY > MAX_INT64:
        raise InvalidParameterError(f'days too large "{raw}"')
    return days * 86_400


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def asset_id_from_symbol(symbol: str) -> int:
    asset_id = symbol_to_id(symbol)
    if asset_id is None:
        raise UnknownAssetError(symbol.lower())
    return asset_id


def account_id_from_hex(raw: str) -> bytes:
    """Decode then check length. Used where the raw hex is decoded first."""
    try:
        decoded = binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise InvalidParameterError(f"could not decode account id: {exc}") from exc
    if len(decoded) != ACCOUNT_ID_SIZE:
        raise InvalidParameterError("account id has incorrect length")
    return decoded


def decode_account_id(raw: str) -> bytes:
    """Check the hex length, then decode."""
    if len(raw) != ACCOUNT_ID_SIZE * 2:
        raise InvalidParameterError("account id has incorrect length")
    try:
        return binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise InvalidParameterError(f"could not decode account id: {exc}") from exc


def decode_match_id(raw: str) -> bytes:
    if len(raw) != MATCH_ID_SIZE * 2:
        raise InvalidParameterError(f'invalid match id "{raw}": incorrect length')
    try:
        return binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise InvalidParameterError(f'invalid match id "{raw}": {exc}') from exc


# ---------------------------------------------------------------------------
# Body payloads
# ---------------------------------------------------------------------------


def notice_text(body: bytes) -> str:
    """Operator notice from a raw request body.

    One trailing newline is dropped (curl adds it when sending from a file).
    The notification envelope stores the payload length in 16 bits.
    """
    if body.endswith(b"\n"):
        body = body[:-1]
    if not body:
        raise EmptyNoticeError()
    if len(body) > MAX_UINT16:
        raise NoticeTooLargeError(MAX_UINT16)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidParameterError(f"notice is not valid UTF-8: {exc}") from exc