"""
Centralized logging configuration for the Wobot project.
This module provides consistent logging setup across backend API and dashboard.
"""

import logging
from pathlib import Path
from typing import Optional

from shared.config_manager import get_config

def setup_logger(name: str, log_file: Optional[str] = None, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with consistent formatting and handlers.

    Args:
        name: Name of the logger (typically module name)
        log_file: Optional log file name (relative to the configured log directory)
        level: Logging level (default: the configured level, INFO if unset)

    Returns:
        Configured logger instance
    """
    config = get_config()
    if level is None:
        level = logging.getLevelName(config.log_level)
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = Path(config.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

def get_api_logger() -> logging.Logger:
    """Get logger for API backend."""
    return setup_logger('wobot_api', 'api.log')

def get_frontend_logger() -> logging.Logger:
    """Get logger for the dashboard."""
    return setup_logger('wobot_frontend', 'frontend.log')

def log_api_call(logger: logging.Logger, method: str, endpoint: str, **kwargs):
    """
    Log an API call with standardized format.

    Args:
        logger: Logger instance
        method: HTTP method (GET, POST, etc.)
        endpoint: API endpoint
        **kwargs: Additional info to log (status, time, data_info)
    """

    msg_parts = [f"{method} {endpoint}"]

    if 'status' in kwargs:
        status_emoji = "✅" if kwargs['status'] < 400 else "❌"
        msg_parts.append(f"Status: {status_emoji} {kwargs['status']}")

    if 'time' in kwargs:
        msg_parts.append(f"Time: {kwargs['time']:.3f}s")

    if 'data_info' in kwargs:
        msg_parts.append(f"Data: {kwargs['data_info']}")

    logger.info(f"🔌 API CALL: {' - '.join(msg_parts)}")
