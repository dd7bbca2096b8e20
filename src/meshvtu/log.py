"""Package logger for meshvtu.

Writers log recorded and flushed appended blocks at DEBUG, handlers log their choices at
INFO. Set the ``DEBUG`` environment variable to see the per-array messages.
"""

import logging
import os
import sys

LOGGER_NAME = "meshvtu"

logger = logging.getLogger(LOGGER_NAME)
_handler = logging.StreamHandler(stream=sys.stdout)
_handler.setFormatter(logging.Formatter(fmt="%(levelname)s [%(name)s] %(message)s"))
logger.addHandler(_handler)
logger.setLevel(logging.DEBUG if os.environ.get("DEBUG") else logging.INFO)
