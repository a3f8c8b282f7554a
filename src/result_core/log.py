import logging
from typing import Final

from pydantic import ValidationError

from .config import get_settings


LOGGER_NAME: Final[str] = "result_core"

# 라이브러리 로거: 호스트 애플리케이션이 설정하기 전까지는 아무것도 출력하지 않는다.
# Library logger; silent until the host application configures logging.
logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def trace_capture(adapter: str, exc: Exception) -> None:
    """
    어댑터가 잡은 예외를 DEBUG 레벨로 기록한다 (trace_captures 가 켜진 경우만).
    Log an exception captured by an adapter at DEBUG level, when
    `Settings.trace_captures` is enabled.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    # 설정 오류가 어댑터 결과를 바꾸면 안 되므로 경고만 남긴다.
    # A broken setting must not change the adapter outcome; warn and skip.
    try:
        settings = get_settings()
    except ValidationError as settings_exc:
        logger.warning("Invalid result_core settings, capture trace skipped: %s", settings_exc)
        return

    if not settings.trace_captures:
        return

    logger.debug(
        "%s captured %s: %s",
        adapter,
        type(exc).__name__,
        exc,
        exc_info=exc,
    )
