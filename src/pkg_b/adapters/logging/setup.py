"""lib_log_rich runtime start-up for the subcommands.

The settings are fixed in code; no configuration file or ``.env`` is read.
lib_log_rich still honours its own ``LOG_*`` variables, so a bad value there
can make ``lib_log_rich.runtime.init`` refuse to start. That refusal is
reported as a warning through stdlib ``logging`` and the command carries on
without the runtime.

Contents:
    * :class:`LoggingSettings` - pydantic model of the runtime settings.
    * :func:`start_logging` - idempotent, non-fatal runtime start.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
from pydantic import BaseModel, ConfigDict

from pkg_b import __init__conf__

logger = logging.getLogger(__name__)


class LoggingSettings(BaseModel):
    """Settings handed to ``lib_log_rich.runtime.RuntimeConfig``.

    Console output stays on stderr at WARNING so stdout carries only the
    banner.

    Example:
        >>> LoggingSettings().console_level
        'WARNING'
        >>> LoggingSettings(environment="test").model_dump()["service"]
        'pkg-b'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    service: str = __init__conf__.name
    environment: str = "prod"
    console_level: str = "WARNING"
    console_stream: str = "stderr"


def start_logging(settings: LoggingSettings | None = None) -> bool:
    """Start the lib_log_rich runtime unless it is already running.

    On success stdlib ``logging`` is bridged into the runtime so module
    loggers reach it.

    Args:
        settings: Runtime settings; ``None`` uses :class:`LoggingSettings` defaults.

    Returns:
        ``True`` when the runtime is running, ``False`` when lib_log_rich
        rejected its settings.
    """
    if lib_log_rich.runtime.is_initialised():
        return True
    resolved = settings or LoggingSettings()
    try:
        lib_log_rich.runtime.init(lib_log_rich.runtime.RuntimeConfig(**resolved.model_dump()))
    except ValueError as exc:
        logger.warning("Logging runtime not started: %s", exc)
        return False
    lib_log_rich.runtime.attach_std_logging()
    return True


__all__ = [
    "LoggingSettings",
    "start_logging",
]
