import logging
from pathlib import Path
from typing import Union


LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Union[str, Path], *, level: int = logging.DEBUG) -> bool:
    """
    Send all logs to ``log_file``; the terminal belongs to the full-screen UI.

    Call this once, before the first logger is used. Returns False when the
    log file cannot be opened, in which case logging goes nowhere.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    log_file = Path(log_file)
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError:
        root.addHandler(logging.NullHandler())
        logging.captureWarnings(True)
        return False

    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return True
