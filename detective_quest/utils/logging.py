"""Logging setup for Detective Quest.

Standard output is the game screen, so log records go to stderr (through
rich) and, optionally, to a file.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers added by setup_logging, replaced on every call
_installed_handlers: List[logging.Handler] = []


def setup_logging(log_dir: Optional[Path] = None, verbose: bool = False) -> Optional[Path]:
    """Configure the root logger.

    Args:
        log_dir: Directory for a timestamped log file (no file when None)
        verbose: Show debug records on the console

    Returns:
        Path of the log file, if one was created
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    log_file = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"detective_quest_{timestamp}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    return log_file
