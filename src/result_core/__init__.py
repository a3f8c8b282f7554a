"""
result_core 패키지.

예외 대신 명시적인 반환 값으로 성공/실패를 표현하는 Result 타입과,
예외를 던지는 코드를 Result 로 바꿔 주는 어댑터(try_sync, try_async)를 제공합니다.

The `result_core` package.

Provides the Result type (Ok | Err) used to represent success or failure as
an explicit value, plus adapters (try_sync, try_async) that turn
exception-raising code into Result values.
"""

from .config import Settings, get_settings
from .result import (
    Err,
    Ok,
    Result,
    ResultKind,
    err,
    is_err,
    is_ok,
    ok,
    try_async,
    try_sync,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ResultKind",
    "ok",
    "err",
    "is_ok",
    "is_err",
    "try_sync",
    "try_async",
    "Settings",
    "get_settings",
]
