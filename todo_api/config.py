# todo_api/config.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

REWRITE_MODES = ("rewrite", "redirect")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    title: str = "Todo Service"
    greeting: str = "Hello World!"
    validation_enabled: bool = True
    rewrite_mode: str = "rewrite"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"环境变量 {name}={raw!r} 不是布尔值，使用默认值 {default}")
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"环境变量 {name}={raw!r} 不是整数，使用默认值 {default}")
        return default


def _env_choice(name: str, default: str, choices: tuple) -> str:
    raw = os.getenv(name)
    if not raw:
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning(f"环境变量 {name}={raw!r} 无效，可选值 {choices}，使用默认值 {default}")
        return default
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """读取 .env 和环境变量，真实环境变量优先"""
    load_dotenv(dotenv_path=env_file, override=False)

    defaults = Settings()
    return Settings(
        title=os.getenv("APP_TITLE", defaults.title),
        greeting=os.getenv("APP_GREETING", defaults.greeting),
        validation_enabled=_env_bool("TODO_VALIDATION_ENABLED", defaults.validation_enabled),
        rewrite_mode=_env_choice("TASKS_REWRITE_MODE", defaults.rewrite_mode, REWRITE_MODES),
        log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper(),
        host=os.getenv("HOST", defaults.host),
        port=_env_int("PORT", defaults.port),
    )
