from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FILENAME = "todocli.log"


def setup_logging(
    *,
    log_dir: Optional[str | Path] = None,
    file_level: int = logging.WARNING,
    console_level: int = logging.ERROR,
) -> Optional[Path]:
    """
    Configure logging with:
    - Console handler: errors only, so the interactive prompt stays clean
    - File handler: everything at file_level, in log_dir/todocli.log

    Call this ONCE, before the first todo is loaded. Returns the log file
    path, or None when the log directory is unusable (console only).
    """
    root = logging.getLogger()
    root.setLevel(min(file_level, console_level))

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_dir is None:
        return None

    log_file = Path(log_dir) / LOG_FILENAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError as exc:
        logging.getLogger(__name__).debug("File logging disabled: %s", exc)
        return None
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
