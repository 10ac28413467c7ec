import logging

from rich.console import Console
from rich.logging import RichHandler

# Results (tables, JSON) go to stdout; log records go to stderr so that
# piped output stays machine-readable.
console = Console(width=100, highlight=False, soft_wrap=True)
log_console = Console(stderr=True, width=100, highlight=False)

_handler = RichHandler(
    console=log_console,
    rich_tracebacks=True,
    markup=False,
    show_path=False,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[_handler],
    force=True,
)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the root logger between INFO and DEBUG."""
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)
