import logging
from typing import Optional

from .config import LOG_LEVEL

_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the root logger once and align uvicorn's loggers."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or LOG_LEVEL or "INFO").upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved_level)

    _CONFIGURED = True
