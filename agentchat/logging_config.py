"""Logging configuration for the chat agent."""

import sys
import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_dir: Optional[str] = None
) -> None:
    """Configure logging for the chat agent.

    Args:
        level: Optional logging level (e.g., logging.DEBUG or "DEBUG"). If None, uses INFO.
        log_dir: Optional directory for log files. If None, only console logging is used.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError("Unknown logging level")
    level = level or logging.INFO

    formatter = logging.Formatter(
        fmt='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Console output goes to stderr so it does not interleave with the chat
    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        main_handler = logging.handlers.RotatingFileHandler(
            log_path / "agentchat.log",
            maxBytes=10_000_000,  # 10MB
            backupCount=5
        )
        main_handler.setFormatter(formatter)
        root_logger.addHandler(main_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            log_path / "error.log",
            maxBytes=10_000_000,  # 10MB
            backupCount=5
        )
        error_handler.setFormatter(formatter)
        error_handler.setLevel(logging.ERROR)
        root_logger.addHandler(error_handler)

    logging.getLogger('agentchat').setLevel(level)

    if level != logging.DEBUG:
        for logger_name in ['asyncio', 'httpx', 'httpcore', 'anthropic', 'openai']:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized", extra={
        "level": logging.getLevelName(level),
        "log_dir": str(log_dir) if log_dir else None
    })
