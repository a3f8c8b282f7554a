from functools import lru_cache
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX: Final[str] = "RESULT_CORE_"


class Settings(BaseSettings):
    """
    result_core 라이브러리 설정.
    Settings for the result_core library.

    결과 값에는 영향을 주지 않고 진단(로깅) 동작만 바꾼다.
    Only diagnostics are affected; no operation returns a different value.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    trace_captures: bool = Field(
        default=False,
        description=(
            "try_sync/try_async 가 잡은 예외를 DEBUG 로그로 남길지 여부 / "
            "Whether adapters log each captured exception at DEBUG level."
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """
    환경 변수 및 .env 파일에서 설정을 로드한다.
    Load settings from environment variables and .env file (cached).
    """
    return Settings()
