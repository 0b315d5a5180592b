import os
import sys

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> :: "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | "
    "{level} | "
    "MODULE: {module} - "
    "FUNC: {function} - "
    "LINE: {line} :: "
    "{message}"
)


def resolve_stream_level(default: str = "INFO") -> str:
    """Pick the console level from ``--stream_level`` or the ``stream_level`` env var."""
    if "--stream_level" in sys.argv:
        idx = sys.argv.index("--stream_level")
        if idx + 1 < len(sys.argv):
            return sys.argv[idx + 1].upper()
    return os.environ.get("stream_level", default).upper()


def loguru_logger(
    name,
    stream_level: str = None,
    file_level="DEBUG",
    filename: str = None,
    enqueue: bool = True,
):
    # Remove default handlers to avoid duplicate logs
    logger.remove()

    stream_level = stream_level or resolve_stream_level()
    logger.add(sys.stdout, level=stream_level, format=CONSOLE_FORMAT, colorize=True)

    if filename is not None:
        logger.add(
            filename,
            level=file_level,
            format=FILE_FORMAT,
            enqueue=enqueue,
            rotation="10 MB",
            retention=10,
        )

    logger.debug(
        f"Logger '{name}' initialized with stream level '{stream_level}' and file level '{file_level}'"
    )

    return logger


__all__ = ("loguru_logger", "resolve_stream_level")
