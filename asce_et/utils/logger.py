"""
Logging for the outer shell of the ASCE reference ET package.

The batch runner, the weather table reader and the CLI log through the
``Logger`` facade over Loguru. The formula modules and the calculator
never log.
"""

from loguru import logger
import sys
from typing import Optional
from contextlib import contextmanager
from pathlib import Path


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{message}</cyan>"
)


class Logger:
    """
    Static Loguru facade.

    ``setup`` replaces every sink, so the CLI can reconfigure the console
    level per invocation and tests can silence output entirely.
    """

    @staticmethod
    def setup(
        name: str = "asce_et",
        log_file: Optional[str] = None,
        level: str = "INFO",
        console: bool = True,
        rotation: str = "10 MB",
        retention: str = "10 files"
    ) -> None:
        """
        Replace the active sinks.

        Args:
            name: Name bound to every record as ``extra["name"]``
            log_file: Optional log file; parent directories are created
            level: Minimum level for all sinks
            console: Whether to log to stderr
            rotation: Size at which the log file rotates
            retention: Number of rotated files to keep
        """
        logger.remove()
        logger.configure(extra={"name": name})

        if console:
            logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True, diagnose=False)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(log_path),
                format=LOG_FORMAT,
                level=level,
                rotation=rotation,
                retention=retention,
                diagnose=False
            )

    @staticmethod
    def debug(message: str) -> None:
        logger.opt(depth=1).debug(message)

    @staticmethod
    def info(message: str) -> None:
        logger.opt(depth=1).info(message)

    @staticmethod
    def warning(message: str) -> None:
        logger.opt(depth=1).warning(message)

    @staticmethod
    def exception(message: str) -> None:
        """Log at ERROR level with the active traceback."""
        logger.opt(depth=1).exception(message)

    @staticmethod
    def log_progress(current: int, total: int, message: str = "Processing") -> None:
        percent = (current / total) * 100 if total > 0 else 0
        logger.info(f"{message}: {current}/{total} records ({percent:.1f}%)")

    @staticmethod
    def configure_for_testing() -> None:
        """Drop the console sink and keep DEBUG for any file sink added later."""
        Logger.setup(level="DEBUG", console=False)


@contextmanager
def log_step(name: str):
    """
    Log the start and outcome of a processing step.

    A failing step is logged with its traceback and the error re-raised.

    Usage:
        with log_step("Computing reference ET for 365 records"):
            ...
    """
    Logger.info(f"Starting: {name}")
    try:
        yield
    except Exception as e:
        Logger.exception(f"[FAILED] {name}: {e}")
        raise
    Logger.info(f"[COMPLETED] {name}")
