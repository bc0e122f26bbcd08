import logging
import os

# Application logger facade (set_level and logger instance)

_LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

# AppData on Windows, home directory elsewhere
APPDATA = os.getenv("APPDATA") or os.path.expanduser("~")
LOG_DIR = os.path.join(APPDATA, "MeetDesk", "logs")
LOG_PATH = os.path.join(LOG_DIR, "app.log")

_logger = logging.getLogger("MeetDesk")
if not _logger.handlers:
    _logger.setLevel(logging.INFO)
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        fh = logging.FileHandler(LOG_PATH, encoding="utf-8")
        fh.setFormatter(fmt)
        _logger.addHandler(fh)
    except OSError:
        # Read-only profile; console only
        pass
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    _logger.addHandler(ch)

logger = _logger


def set_level(name: str):
    """Adjust the application logger level.

    Accepts case-insensitive names (e.g., 'error', 'DEBUG'). Invalid input is ignored.
    """
    if not name:
        return
    lvl = _LOG_LEVELS.get(str(name).upper())
    if lvl is None:
        return
    logger.setLevel(lvl)
    for h in logger.handlers:
        h.setLevel(lvl)


__all__ = ["logger", "set_level", "LOG_PATH", "LOG_DIR"]
