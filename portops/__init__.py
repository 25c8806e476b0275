"""SNMP switch port operations.

Discovers the interfaces of a network switch over SNMP (v1/v2c) and flips
them administratively up or down by name.
"""

__version__ = "0.1.0"

import os
import sys
from typing import Any, Callable, Dict

from loguru import logger as glogger

glogger.disable(__name__)


def _loguru_skiplog_filter(record: dict) -> bool:  # type: ignore[type-arg]
    """Filter function to hide records with ``extra['skiplog']`` set."""
    return not record.get("extra", {}).get("skiplog", False)


def configure_logging(
    loguru_filter: Callable[[Dict[str, Any]], bool] = _loguru_skiplog_filter,
    level: str | None = None,
) -> None:
    """Configure a default ``loguru`` sink with a convenient format and filter."""
    os.environ["LOGURU_LEVEL"] = level or os.getenv("LOGURU_LEVEL", "INFO")
    glogger.remove()
    logger_fmt: str = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>::<cyan>{extra[classname]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )
    glogger.add(sys.stderr, level=os.getenv("LOGURU_LEVEL"), format=logger_fmt, filter=loguru_filter)  # type: ignore[arg-type]
    glogger.configure(extra={"classname": "None", "skiplog": False})
    glogger.enable(__name__)


from portops.config import PortOpsConfig  # noqa: E402
from portops.exceptions import (  # noqa: E402
    ControlError,
    InvalidArgumentError,
    PortNotFoundError,
    QueryError,
    SessionBusyError,
    SwitchConnectionError,
    SwitchError,
)
from portops.models import Ack, Port, PortState  # noqa: E402
from portops.registry import PortRegistry  # noqa: E402
from portops.session import SwitchSession, open_session  # noqa: E402

__all__ = [
    "glogger",
    "configure_logging",
    "open_session",
    "SwitchSession",
    "PortRegistry",
    "PortOpsConfig",
    "Port",
    "PortState",
    "Ack",
    "SwitchError",
    "SwitchConnectionError",
    "QueryError",
    "ControlError",
    "PortNotFoundError",
    "InvalidArgumentError",
    "SessionBusyError",
]
