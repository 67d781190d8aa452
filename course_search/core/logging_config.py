"""
Logging configuration - one stdout handler, level from settings.
Modules log through logging.getLogger(__name__).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)

    # The ES transport logs every request at INFO
    logging.getLogger("elastic_transport").setLevel(logging.WARNING)
    logging.getLogger("uvicorn").setLevel(level)
