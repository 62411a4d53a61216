"""Tests for adm_common.errors and adm_common.response."""

import json

from src.adm_common.errors import (
    AppError,
    EngineFailureError,
    MarketNotRunningError,
    MarketRunningError,
    UnknownMarketError,
    UnsupportedAssetError,
)
from src.adm_common.response import empty_response, error_response, success_response
from src.adm_market.application.schemas import MarketStatus


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_custom_http_status(self) -> None:
        err = AppError(code=1001, message="bad n", http_status=400)
        assert err.http_status == 400

    def test_is_exception(self) -> None:
        err = AppError(code=1001, message="test")
        assert isinstance(err, Exception)


class TestSpecificErrors:
    def test_unknown_market(self) -> None:
        err = UnknownMarketError("dcr_btc")
        assert err.code == 3001
        assert err.http_status == 400
        assert err.message == 'unknown market "dcr_btc"'

    def test_market_running(self) -> None:
        err = MarketRunningError("dcr_btc")
        assert err.code == 2001
        assert err.http_status == 400
        assert err.message == 'market "dcr_btc" running'

    def test_market_not_running(self) -> None:
        err = MarketNotRunningError("dcr_btc")
        assert err.code == 2002
        assert err.http_status == 400
        assert err.message == 'market "dcr_btc" not running'

    def test_unsupported_asset(self) -> None:
        err = UnsupportedAssetError("doge", 3)
        assert err.http_status == 400
        assert "doge" in err.message
        assert "3" in err.message

    def test_engine_failure_keeps_detail_out_of_message(self) -> None:
        err = EngineFailureError("failed to suspend market", RuntimeError("db locked"))
        assert err.http_status == 500
        assert "db locked" not in err.message
        assert isinstance(err.detail, RuntimeError)


class TestResponses:
    def test_success_is_indented_json_with_newline(self) -> None:
        resp = success_response({"market": "dcr_btc", "final_epoch": 7})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/json; charset=utf-8"
        assert resp.body.endswith(b"}\n")
        assert b'\n    "market": "dcr_btc"' in resp.body
        assert json.loads(resp.body) == {"market": "dcr_btc", "final_epoch": 7}

    def test_success_keeps_none_values(self) -> None:
        resp = success_response({"cancelmax": 0.8, "regfeeconfirms": None})
        assert json.loads(resp.body) == {"cancelmax": 0.8, "regfeeconfirms": None}

    def test_market_status_omits_unset_fields(self) -> None:
        status = MarketStatus(running=True, epoch_len=60_000, active_epoch=5, start_epoch=1)
        assert json.loads(success_response(status).body) == {
            "running": True,
            "epoch_len": 60_000,
            "active_epoch": 5,
            "start_epoch": 1,
        }

    def test_market_status_keeps_scheduled_suspend(self) -> None:
        status = MarketStatus(
            market="dcr_btc", running=True, epoch_len=60_000, active_epoch=5,
            start_epoch=1, final_epoch=9, persist_book=False,
        )
        body = json.loads(success_response({"dcr_btc": status}).body)
        assert body["dcr_btc"]["final_epoch"] == 9
        assert body["dcr_btc"]["persist_book"] is False
        assert body["dcr_btc"]["market"] == "dcr_btc"

    def test_success_string(self) -> None:
        assert success_response("pong").body == b'"pong"\n'

    def test_error_is_plain_text(self) -> None:
        resp = error_response('unknown market "x"', 400)
        assert resp.status_code == 400
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.body == b'unknown market "x"\n'

    def test_empty(self) -> None:
        resp = empty_response()
        assert resp.status_code == 200
        assert resp.body == b""
