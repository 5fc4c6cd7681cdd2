from __future__ import annotations

import logging
import os
import pathlib
import time
from typing import Any, Dict, Optional, Union

import orjson
import tomli

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.othello_lite"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"

PathLike = Union[str, pathlib.Path]


def ensure_config(config_path: Optional[PathLike] = None) -> bool:
    """Create the user config from defaults if missing; True when created."""
    path = pathlib.Path(config_path) if config_path is not None else CONFIG_PATH
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
    logging.getLogger(__name__).info("Initialised configuration at %s", path)
    return True


def load_config(config_path: Optional[PathLike] = None) -> Dict[str, Any]:
    """Parse the TOML config; an absent or broken file yields {}."""
    path = pathlib.Path(config_path) if config_path is not None else CONFIG_PATH
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except FileNotFoundError:
        logging.getLogger(__name__).warning("Config file not found: %s", path)
        return {}
    except (OSError, tomli.TOMLDecodeError) as e:
        logging.getLogger(__name__).warning("Error loading config %s: %s", path, e)
        return {}


def load_defaults() -> Dict[str, Any]:
    with open(DEFAULTS_PATH, "rb") as f:
        return tomli.load(f)


def log_event(module: str, event: str, **kwargs: Any) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    try:
        line = orjson.dumps(payload).decode("utf-8")
    except TypeError:
        logging.getLogger("event").exception("failed to log event: %s", {"module": module, "event": event})
        return
    logging.getLogger(f"event.{module}").info(line)
