"""
Logging setup
"""

import sys
from datetime import datetime
from typing import Any, Dict

from loguru import logger

from .config_utils import mk_logs_path

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def setup_logging(config: Dict[str, Any], console: bool = True) -> None:
    """Send logs to stderr and to a dated, rotating file under ``logging.dir``"""
    level = str(config["logging"].get("level", "INFO")).upper()
    log_path = mk_logs_path(config)

    logger.remove()
    if console:
        logger.add(sys.stderr, level=level)
    logger.add(
        log_path / f"{datetime.now().strftime('%Y-%m-%d')}.log",
        rotation=config["logging"].get("rotation", "100 MB"),
        enqueue=True,
        format=LOG_FORMAT,
        level=level,
    )
