#!/usr/bin/env python3
"""
Development entry point

Starts uvicorn with logs going to the console and to a per-run file, so a
session can be inspected after the server stops.
"""
import logging
import os
from datetime import datetime

import uvicorn

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: str = settings.LOG_DIR, level: str = settings.LOG_LEVEL) -> str:
    """
    Route the root logger to stdout and logs/registry_<timestamp>.log

    Returns:
        str: path of the log file for this run
    """
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"registry_{datetime.now():%Y%m%d_%H%M%S}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(), logging.FileHandler(log_file, encoding='utf-8')]
    for handler in handlers:
        handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = handlers
    return log_file


if __name__ == "__main__":
    log_file = setup_logging()
    logging.info(f"{settings.PROJECT_NAME} listening on {settings.HOST}:{settings.PORT}, logging to {log_file}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
