"""Tests for adm_common.params: request parameter validation."""

from datetime import UTC, datetime, timedelta

import pytest

from src.adm_common import params
from src.adm_common.datetime_utils import to_unix_ms
from src.adm_common.errors import (
    AppError,
    EmptyNoticeError,
    InvalidParameterError,
    NoticeTooLargeError,
    PastScheduleError,
    UnknownAssetError,
)

GOOD_ACCOUNT = "ab" * 32


class TestBool:
    @pytest.mark.parametrize("raw", ["1", "t", "T", "TRUE", "true", "True"])
    def test_true_spellings(self, raw: str) -> None:
        assert params.parse_bool(raw, "x") is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "FALSE", "false", "False"])
    def test_false_spellings(self, raw: str) -> None:
        assert params.parse_bool(raw, "x") is False

    @pytest.mark.parametrize("raw", ["yes", "no", "tRUE", " true", "2", ""])
    def test_garbage_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            params.parse_bool(raw, "persist book")
        assert exc_info.value.http_status == 400
        assert "persist book" in exc_info.value.message

    def test_absent_uses_default(self) -> None:
        assert params.optional_bool(None, "persist", True) is True
        assert params.optional_bool(None, "include inactive", False) is False

    def test_empty_uses_default(self) -> None:
        assert params.optional_bool("", "persist", True) is True


class TestIntegers:
    def test_signed(self) -> None:
        assert params.parse_int("-5", "n") == -5
        assert params.parse_int("+7", "n") == 7

    def test_signed_64_bounds(self) -> None:
        assert params.parse_int(str(2**63 - 1), "n") == 2**63 - 1
        assert params.parse_int(str(-(2**63)), "n") == -(2**63)
        with pytest.raises(InvalidParameterError):
            params.parse_int(str(2**63), "n")

    @pytest.mark.parametrize("raw", ["1_000", " 5", "5 ", "0x10", "1.0", "abc", ""])
    def test_non_decimal_rejected(self, raw: str) -> None:
        with pytest.raises(InvalidParameterError):
            params.parse_int(raw, "n")

    def test_unsigned_rejects_sign(self) -> None:
        with pytest.raises(InvalidParameterError):
            params.parse_uint("-1", "n", bits=16)
        with pytest.raises(InvalidParameterError):
            params.parse_uint("+1", "n", bits=16)

    def test_unsigned_width(self) -> None:
        assert params.parse_uint("65535", "n", bits=16) == 65535
        with pytest.raises(InvalidParameterError):
            params.parse_uint("65536", "n", bits=16)
        assert params.parse_uint(str(2**32 - 1), "strength", bits=32) == 2**32 - 1
        with pytest.raises(InvalidParameterError):
            params.parse_uint(str(2**32), "strength", bits=32)

    def test_optional_defaults(self) -> None:
        assert params.optional_int(None, "n", 100) == 100
        assert params.optional_uint(None, "strength", 1, bits=32) == 1


class TestFloat:
    @pytest.mark.parametrize("raw,expected", [("1.5", 1.5), ("2", 2.0), (".5", 0.5), ("1e2", 100.0)])
    def test_valid(self, raw: str, expected: float) -> None:
        assert params.parse_float(raw, "fee rate scale") == expected

    @pytest.mark.parametrize("raw", ["inf", "nan", "1e999", "one", "", " 1"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidParameterError):
            params.parse_float(raw, "fee rate scale")


class TestScheduleTime:
    def test_absent_means_asap(self) -> None:
        assert params.schedule_time(None, "suspend") is None
        assert params.schedule_time("", "suspend") is None

    def test_future_accepted(self) -> None:
        future = datetime.now(UTC) + timedelta(minutes=5)
        when = params.schedule_time(str(to_unix_ms(future)), "suspend")
        assert when is not None
        assert to_unix_ms(when) == to_unix_ms(future)

    def test_past_rejected(self) -> None:
        past = datetime.now(UTC) - timedelta(seconds=1)
        with pytest.raises(PastScheduleError) as exc_info:
            params.schedule_time(str(to_unix_ms(past)), "resume")
        assert exc_info.value.http_status == 400
        assert "resume time is in the past" in exc_info.value.message

    def test_garbage_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            params.schedule_time("tomorrow", "suspend")

    def test_unrepresentable_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            params.schedule_time(str(2**63 - 1), "suspend")


class TestBondDays:
    def test_required(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            params.bond_lock_seconds(None)
        assert "no days duration specified" in exc_info.value.message

    def test_zero_rejected(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            params.bond_lock_seconds("0")
        assert "days parsed to zero" in exc_info.value.message

    def test_seconds(self) -> None:
        assert params.bond_lock_seconds("5") == 5 * 86_400

    def test_overflowing_duration_rejected(self) -> None:
        with pytest.raises(InvalidParameterError):
            params.bond_lock_seconds(str(2**40))


class TestAsset:
    def test_case_insensitive(self) -> None:
        assert params.asset_id_from_symbol("DCR") == 42
        assert params.asset_id_from_symbol("btc") == 0

    def test_unknown(self) -> None:
        with pytest.raises(UnknownAssetError) as exc_info:
            params.asset_id_from_symbol("NOPE")
        assert exc_info.value.http_status == 400
        assert '"nope"' in exc_info.value.message


# Both account id decoders must agree on every input.
BAD_ACCOUNTS = [
    "",
    "ab",
    "ab" * 31,
    "ab" * 33,
    "ab" * 32 + "a",
    "zz" * 32,
    "ab" * 31 + " a",
    "ab" * 31 + "é",
]


class TestAccountIds:
    @pytest.mark.parametrize(
        "decode", [params.account_id_from_hex, params.decode_account_id]
    )
    def test_good(self, decode) -> None:
        assert decode(GOOD_ACCOUNT) == bytes([0xAB]) * 32

    @pytest.mark.parametrize(
        "decode", [params.account_id_from_hex, params.decode_account_id]
    )
    @pytest.mark.parametrize("raw", BAD_ACCOUNTS)
    def test_bad(self, decode, raw: str) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            decode(raw)
        assert exc_info.value.http_status == 400

    def test_upper_case_hex_accepted(self) -> None:
        assert params.decode_account_id("AB" * 32) == params.account_id_from_hex("ab" * 32)


class TestMatchId:
    def test_good(self) -> None:
        assert params.decode_match_id("01" * 32) == bytes([1]) * 32

    @pytest.mark.parametrize("raw", ["01" * 31, "gg" * 32])
    def test_bad(self, raw: str) -> None:
        with pytest.raises(InvalidParameterError):
            params.decode_match_id(raw)


class TestNotice:
    def test_trailing_newline_stripped(self) -> None:
        assert params.notice_text(b"maintenance at 12:00\n") == "maintenance at 12:00"

    def test_only_one_newline_stripped(self) -> None:
        assert params.notice_text(b"hi\n\n") == "hi\n"

    @pytest.mark.parametrize("body", [b"", b"\n"])
    def test_empty(self, body: bytes) -> None:
        with pytest.raises(EmptyNoticeError) as exc_info:
            params.notice_text(body)
        assert "no message to broadcast" in exc_info.value.message

    def test_max_size(self) -> None:
        assert len(params.notice_text(b"x" * 65535)) == 65535
        assert len(params.notice_text(b"x" * 65535 + b"\n")) == 65535

    def test_too_large(self) -> None:
        with pytest.raises(NoticeTooLargeError) as exc_info:
            params.notice_text(b"x" * 65536)
        assert "65535" in exc_info.value.message

    def test_errors_are_app_errors(self) -> None:
        with pytest.raises(AppError):
            params.notice_text(b"")
