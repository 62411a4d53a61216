"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Request input (path/query/body parameters)
  2xxx: Resource state (valid subject, wrong state for the action)
  3xxx: Market / asset resolution
  9xxx: Engine / system

Every client-facing failure is a 400; anything the Core Engine gets wrong is
a 500. The message is sent to the caller as a plain-text body.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Request input ---

class InvalidParameterError(AppError):
    def __init__(self, message: str) -> None:
        super().__init__(1001, message, 400)


class PastScheduleError(AppError):
    def __init__(self, action: str, when: str) -> None:
        super().__init__(
            1002, f"specified market {action} time is in the past: {when}", 400
        )


class EmptyNoticeError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "no message to broadcast", 400)


class NoticeTooLargeError(AppError):
    def __init__(self, limit: int) -> None:
        super().__init__(1004, f"cannot send messages larger than {limit} bytes", 400)


# --- 2xxx: Resource state ---

class MarketRunningError(AppError):
    def __init__(self, market: str) -> None:
        super().__init__(2001, f'market "{market}" running', 400)


class MarketNotRunningError(AppError):
    def __init__(self, market: str) -> None:
        super().__init__(2002, f'market "{market}" not running', 400)


# --- 3xxx: Market / asset resolution ---

class UnknownMarketError(AppError):
    def __init__(self, market: str) -> None:
        super().__init__(3001, f'unknown market "{market}"', 400)


class UnknownAssetError(AppError):
    def __init__(self, symbol: str) -> None:
        super().__init__(3002, f'unknown asset "{symbol}"', 400)


class UnsupportedAssetError(AppError):
    def __init__(self, symbol: str, asset_id: int) -> None:
        super().__init__(3003, f'unsupported asset "{symbol}" / {asset_id}', 400)


# --- 9xxx: Engine / system ---

class EngineFailureError(AppError):
    """The Core Engine failed or answered inconsistently.

    ``message`` is what the operator sees; ``detail`` only goes to the log.
    """

    def __init__(self, message: str, detail: object = None) -> None:
        super().__init__(9001, message, 500)
        self.detail = detail


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
