from __future__ import annotations

__version__ = "1.4.2"
__name__ = "hijri_calendar"

import os
from pathlib import Path

from chromatrace import LoggingConfig, LoggingSettings

from hijri_calendar.utils.basic_logger import loguru_logger


DEFAULT_PATH = Path(os.path.realpath(__file__)).parents[1]
CACHE_DIR = Path.home() / ".hijri_calendar"


logging_config = LoggingConfig(
    settings=LoggingSettings(
        application_level="DEBUG",
        enable_tracing=True,
        ignore_nan_trace=True,
        log_level="INFO",
        file_path="hijri_calendar.log",
        enable_file_logging=False,
        max_bytes=10 * 1024 * 1024,
        backup_count=20,
    )
)
LOGGER = logging_config.get_logger(__name__)


__all__ = ["__version__", "__name__", "loguru_logger", "DEFAULT_PATH", "CACHE_DIR", "LOGGER"]
