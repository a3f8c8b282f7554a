from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal

from typing_extensions import TypeIs

from .log import trace_capture


class ResultKind(str, Enum):
    """
    Result 의 판별자(discriminator) 값.
    Discriminator of a Result variant.
    """

    OK = "ok"
    ERR = "err"


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """
    성공 결과 값을 담는 래퍼입니다.

    Wrapper type that represents the successful branch of a Result.
    """

    # match Ok(value) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Ok(value)`
    __match_args__ = ("value",)

    value: T

    @property
    def kind(self) -> Literal[ResultKind.OK]:
        return ResultKind.OK

    def is_ok(self) -> Literal[True]:
        """
        정적 타입 좁히기가 필요하면 모듈 함수 is_ok() 또는 match 를 사용한다.
        For static narrowing of a Result union, use the module-level
        `is_ok()` function or `match`; this method does not narrow.
        """
        return True

    def is_err(self) -> Literal[False]:
        return False

    def map[U](self, fn: Callable[[T], U]) -> "Ok[U]":
        """
        성공 값에 fn 을 적용한 새 Ok 를 반환한다.
        Return a new Ok holding `fn(value)`.

        fn 에서 발생한 예외는 잡지 않는다.
        Exceptions raised by `fn` are not caught.
        """
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], object]) -> "Ok[T]":
        """
        Ok 에는 에러가 없으므로 같은 값을 담은 새 Ok 를 반환한다 (fn 은 호출되지 않음).
        Return a new Ok holding the same value; `fn` is never called.
        """
        return Ok(self.value)


@dataclass(slots=True, frozen=True)
class Err[E]:
    """
    실패(에러) 정보를 담는 래퍼입니다.

    Wrapper type that represents the error branch of a Result.
    """

    # match Err(error) 구문에서 위치 인자로 매칭될 필드 정의
    # Define which field is used positionally in `match Err(error)`
    __match_args__ = ("error",)

    error: E

    @property
    def kind(self) -> Literal[ResultKind.ERR]:
        return ResultKind.ERR

    def is_ok(self) -> Literal[False]:
        """Does not narrow; see `Ok.is_ok`."""
        return False

    def is_err(self) -> Literal[True]:
        return True

    def map(self, fn: Callable[[Any], object]) -> "Err[E]":
        """
        같은 에러 객체를 담은 새 Err 를 반환한다 (fn 은 호출되지 않음).
        Return a new Err holding the same error object; `fn` is never called.
        """
        return Err(self.error)

    def map_err[F](self, fn: Callable[[E], F]) -> "Err[F]":
        """
        에러 값에 fn 을 적용한 새 Err 를 반환한다.
        Return a new Err holding `fn(error)`.

        fn 에서 발생한 예외는 잡지 않는다.
        Exceptions raised by `fn` are not caught.
        """
        return Err(fn(self.error))


type Result[T, E] = Ok[T] | Err[E]
"""
도메인/서비스 계층에서 사용하는 공용 Result 타입입니다.

Generic Result type used as the shared error/value representation
across domain and service boundaries.

- T: 성공 시 반환되는 값의 타입 (success type)
- E: 실패(에러) 시 반환되는 정보의 타입 (error type)
"""


def ok[T](value: T) -> Ok[T]:
    """
    value 를 Ok 로 감싼다. 어떤 값(None 포함)이든 허용한다.
    Wrap `value` in an Ok. Any value, including None, is accepted.
    """
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """
    error 를 Err 로 감싼다. 어떤 값(None 포함)이든 허용한다.
    Wrap `error` in an Err. Any value, including None, is accepted.
    """
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """
    Result가 Ok 인지 여부를 반환합니다.

    Return True if the given Result is an Ok value.
    """
    return result.is_ok()


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """
    Result가 Err 인지 여부를 반환합니다.

    Return True if the given Result is an Err value.
    """
    return result.is_err()


def try_sync[T](fn: Callable[[], T]) -> Result[T, Exception]:
    """
    fn 을 호출하고 그 결과를 Result 로 돌려준다.
    Call `fn` and capture its outcome as a Result.

    - 정상 반환 값 v 는 Ok(v) 가 된다.
      A normal return value `v` becomes `Ok(v)`.
    - 발생한 예외 e 는 변환 없이 그대로 Err(e) 가 된다.
      A raised exception `e` becomes `Err(e)`, captured verbatim.

    KeyboardInterrupt, SystemExit 등 Exception 이 아닌 BaseException 은
    애플리케이션 실패가 아니므로 그대로 전파된다.
    BaseException signals that are not Exceptions (KeyboardInterrupt,
    SystemExit, ...) propagate.
    """
    try:
        return Ok(fn())
    except Exception as exc:  # noqa: BLE001
        trace_capture("try_sync", exc)
        return Err(exc)


async def try_async[T](awaitable: Awaitable[T]) -> Result[T, Exception]:
    """
    awaitable 이 완료될 때까지 기다린 뒤 결과를 Result 로 돌려준다.
    Await `awaitable` and capture its outcome as a Result.

    타임아웃이나 취소 처리는 제공하지 않는다. asyncio.CancelledError 는
    그대로 전파된다.
    No timeout or cancellation handling; `asyncio.CancelledError` propagates.
    """
    try:
        value = await awaitable
    except Exception as exc:  # noqa: BLE001
        trace_capture("try_async", exc)
        return Err(exc)
    return Ok(value)


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
]
