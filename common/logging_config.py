import logging
import os
from typing import Dict, Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

# capped at WARNING
QUIET_LOGGERS = ("PIL",)


def resolve_level(cfg: Optional[Dict] = None, default_level: int = logging.INFO) -> int:
    """MAZE_LOG_LEVEL (env or config) wins over the config's log_level."""
    cfg = cfg or {}
    value = os.getenv("MAZE_LOG_LEVEL") or cfg.get("MAZE_LOG_LEVEL") or cfg.get("log_level")
    if value is None or value == "":
        return default_level
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default_level


def configure_logging(cfg: Optional[Dict] = None, default_level: int = logging.INFO) -> int:
    level = resolve_level(cfg, default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return level
