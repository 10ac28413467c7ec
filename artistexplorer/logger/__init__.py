"""Rich-backed logging setup."""

from artistexplorer.logger.logger import console, get_logger, log_console, set_verbose

__all__ = ["console", "get_logger", "log_console", "set_verbose"]
