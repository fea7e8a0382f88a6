import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> float | None:
    value = os.getenv(name)
    if not value:
        return None
    return float(value)


class Settings:
    PROJECT_NAME: str = "CodeCraft Playground"
    PROJECT_VERSION: str = "1.0.0"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # remote execution service
    EXECUTION_URL: str = os.getenv("EXECUTION_URL", "http://44.198.9.154:3000/api/run")
    # unset means no timeout, a hung service keeps the run in flight
    EXECUTION_TIMEOUT_SECONDS: float | None = _optional_float("EXECUTION_TIMEOUT_SECONDS")

    # code snapshot storage, in-process when REDIS_URL is unset
    REDIS_URL: str | None = os.getenv("REDIS_URL")
    SNAPSHOT_KEY: str = os.getenv("SNAPSHOT_KEY", "savedCode")
    # snapshot writes are best-effort, a slow Redis gives up after this
    REDIS_SOCKET_TIMEOUT_SECONDS: float = float(os.getenv("REDIS_SOCKET_TIMEOUT_SECONDS", "2"))

    # editor defaults
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "cpp")
    FONT_SIZE_MIN: int = int(os.getenv("FONT_SIZE_MIN", "12"))
    FONT_SIZE_MAX: int = int(os.getenv("FONT_SIZE_MAX", "24"))
    FONT_SIZE_DEFAULT: int = int(os.getenv("FONT_SIZE_DEFAULT", "17"))


settings = Settings()
