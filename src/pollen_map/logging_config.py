# src/pollen_map/logging_config.py
import logging

from rich.logging import RichHandler

from .config import LOG_LEVEL

# Third-party loggers that flood the console under `streamlit run`
QUIET_LOGGERS = ("urllib3", "fsevents", "watchdog", "PIL", "matplotlib")


def configure(level: str = LOG_LEVEL) -> None:
    """Rich console logging for the app; noisy libraries are held at WARNING."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_time=False, show_path=False, markup=False)],
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("pollen_map").setLevel(level.upper())
