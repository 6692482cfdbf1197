import os
from dataclasses import dataclass


def env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {raw!r}") from None


def env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class FetchConfig:
    connect_timeout: float
    read_timeout: float
    write_timeout: float
    pool_timeout: float

    retries: int
    backoff_base: float
    user_agent: str


def load_fetch_config() -> FetchConfig:
    return FetchConfig(
        connect_timeout=env_float("BWT_CONNECT_TIMEOUT_SECONDS", "10"),
        read_timeout=env_float("BWT_READ_TIMEOUT_SECONDS", "30"),
        write_timeout=env_float("BWT_WRITE_TIMEOUT_SECONDS", "30"),
        pool_timeout=env_float("BWT_POOL_TIMEOUT_SECONDS", "30"),
        retries=max(1, env_int("BWT_RETRIES", "4")),
        backoff_base=env_float("BWT_BACKOFF_BASE_SECONDS", "1.5"),
        user_agent=os.getenv("BWT_USER_AGENT", "borderwait/0.1"),
    )
