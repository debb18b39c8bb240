"""
Loguru configuration for Artlens

Provides centralized logger configuration with:
- Console output
- File logging to logs/ directory (when ARTLENS_LOG_MODE=file)
- Automatic log rotation

Log Mode Control:
    Set environment variable ARTLENS_LOG_MODE to control file logging:
    - ARTLENS_LOG_MODE=file: Enable file logging
    - ARTLENS_LOG_MODE=none or not set: Console only (default)
"""

import os
import sys
from pathlib import Path
from typing import Optional, List
from loguru import logger


LOG_MODE_ENV = "ARTLENS_LOG_MODE"
LOG_MODE_FILE = "file"
LOG_MODE_NONE = "none"

_configured = False

def is_file_logging_enabled() -> bool:
    """
    Check if file logging is enabled via environment variable.

    Returns:
        True if ARTLENS_LOG_MODE=file, False otherwise
    """
    return os.environ.get(LOG_MODE_ENV, "").lower() == LOG_MODE_FILE


def make_component_filter(min_level_name: str, debug_components: List[str]):
    """
    Create a loguru filter that lets DEBUG through for selected components.

    Components are identified by the 'component' field in record extra
    (set with logger.bind(component=<name>)). Prefix matching is used, so
    "GeminiDescriber" matches "GeminiDescriber-primary".

    Args:
        min_level_name: Minimum level for every other component (e.g., "INFO")
        debug_components: Component name prefixes allowed to log at DEBUG

    Returns:
        Filter function for a loguru handler
    """
    def component_filter(record) -> bool:
        component_name = record["extra"].get("component") or ""
        if any(component_name.startswith(prefix) for prefix in debug_components):
            return True

        if debug_components:
            # Handler level is DEBUG here, so enforce the minimum ourselves
            return record["level"].no >= logger.level(min_level_name).no

        return True

    return component_filter


def configure_logger(
    log_dir: str = "logs",
    level: str = "INFO",
    rotation: str = "50 MB",
    retention: str = "14 days",
    console_level: Optional[str] = None,
    file_level: Optional[str] = None,
    debug_components: Optional[List[str]] = None,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure loguru logger with console and optional file outputs.

    Args:
        log_dir: Directory for log files (default: "logs")
        level: Default log level (default: "INFO")
        rotation: When to rotate log files
        retention: How long to keep log files
        console_level: Console log level (default: same as level)
        file_level: File log level (default: same as level)
        debug_components: Component names to enable DEBUG output for
                          (e.g., ["DescriptionGenerator"])
        log_file: Explicit log file path; enables file logging regardless
                  of ARTLENS_LOG_MODE

    Example:
        >>> from artlens.utils.logger_config import configure_logger
        >>> configure_logger(level="DEBUG")
        >>> configure_logger(level="INFO", debug_components=["GeminiDescriber"])
    """
    global _configured

    if _configured:
        logger.warning("Logger already configured, skipping reconfiguration")
        return

    logger.remove()
    logger.configure(extra={"component": "artlens"})

    console_level = console_level or level
    file_level = file_level or level
    debug_components = debug_components or []

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<yellow>[{extra[component]}]</yellow> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
               "<level>{message}</level>",
        level="DEBUG" if debug_components else console_level,
        filter=make_component_filter(console_level, debug_components),
        colorize=True,
    )

    file_logging_enabled = bool(log_file) or is_file_logging_enabled()
    if file_logging_enabled:
        if log_file:
            log_target = Path(log_file)
        else:
            log_target = Path(log_dir) / "artlens_{time:YYYY-MM-DD}.log"
        log_target.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_target),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | [{extra[component]}] | {name}:{function}:{line} | {message}",
            level="DEBUG" if debug_components else file_level,
            filter=make_component_filter(file_level, debug_components),
            rotation=rotation,
            retention=retention,
            compression=None if log_file else "zip",
            encoding="utf-8",
        )

    _configured = True

    debug_info = f" (DEBUG components: {', '.join(debug_components)})" if debug_components else ""
    file_info = f", file={file_level}, target={log_target}" if file_logging_enabled else " (file logging disabled)"
    logger.info(f"Logger configured: console={console_level}{file_info}{debug_info}")


def reset_logger() -> None:
    """
    Reset logger configuration flag.

    Allows configure_logger() to run again. Useful for tests.
    """
    global _configured
    _configured = False
    logger.remove()


def auto_configure():
    """Auto-configure logger on module import with default settings."""
    # Tests install their own handlers via caplog / loguru sinks
    if "pytest" in sys.modules:
        return

    if not _configured:
        try:
            configure_logger()
        except Exception as e:
            print(f"Warning: Failed to configure logger: {e}", file=sys.stderr)


auto_configure()
