"""Shared utilities — console output and file logging for the keel CLI."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console

# ---------------------------------------------------------------------------
# Console singletons
# ---------------------------------------------------------------------------
console = Console()
err_console = Console(stderr=True)

TIMESTAMP = datetime.now().strftime("%Y-%m-%d-%H%M%S")

# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------


def print_info(msg: str) -> None:
    console.print(f"[blue]ℹ {msg}[/blue]")


def print_success(msg: str) -> None:
    console.print(f"[bold green]✔ {msg}[/bold green]")


def print_warning(msg: str) -> None:
    err_console.print(f"[bold yellow]⚠ {msg}[/bold yellow]")


def print_error(msg: str) -> None:
    err_console.print(f"[bold red]✖ {msg}[/bold red]")


def print_detail(msg: str) -> None:
    console.print(f"  {msg}")


def die(msg: str, code: int = 1) -> None:
    print_error(msg)
    sys.exit(code)


# ---------------------------------------------------------------------------
# File-based logging
# ---------------------------------------------------------------------------


def init_logging(
    prefix: str = "keel",
    log_dir: Optional[Path] = None,
    level: Optional[str] = None,
) -> Optional[Path]:
    """Attach a file handler to the ``keel`` logger. Returns the log file path.

    Logging is best-effort: if the log directory can't be created the CLI
    keeps running without a log file.
    """
    from .config import settings

    if log_dir is None:
        log_dir = settings.log_dir
    logger = logging.getLogger("keel")
    logger.setLevel((level or settings.log_level).upper())

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print_warning(f"Logging disabled: can't create {log_dir} ({e})")
        return None

    log_file = log_dir / f"{prefix}-{TIMESTAMP}.log"
    if not any(
        isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file.absolute()
        for h in logger.handlers
    ):
        fh = logging.FileHandler(log_file)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(fh)
    return log_file
