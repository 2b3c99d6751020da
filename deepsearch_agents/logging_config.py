import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional, Union


def setup_logging(level: str = "INFO", log_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure app-wide logging to console, with rotation to file when log_dir is set."""

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "filename": str(log_dir / "app.log"),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 3,
            "encoding": "utf-8",
        }

    handler_names = list(handlers)
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
        },
        "handlers": handlers,
        "loggers": {
            "uvicorn.error": {"level": level, "handlers": handler_names, "propagate": False},
            "uvicorn.access": {"level": level, "handlers": handler_names, "propagate": False},
        },
        "root": {
            "level": level,
            "handlers": handler_names,
        },
    }

    logging.config.dictConfig(logging_config)
    return logging.getLogger("deepsearch_agents")
