"""Logging service for replaycache.

This module provides centralized loguru configuration. The library logs
through `loguru.logger` either way; applications call `configure` when they
want replaycache's own sink setup.
"""

import sys
from typing import Any, List, Optional
from omegaconf import DictConfig, OmegaConf
from loguru import logger

from ..utils.config import config_manager, get_log_level


class LoggingService:
    """Service for managing logging configuration."""

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "{level: <8} | "
        "{name}:{function}:{line} - "
        "{message}"
    )

    def __init__(self):
        """Initialize the logging service."""
        self._handler_ids: List[int] = []
        self._configured = False

    @property
    def configured(self) -> bool:
        return self._configured

    def configure(self, cfg: Optional[Any] = None, sink: Any = sys.stderr) -> List[int]:
        """Configure loguru sinks.

        Args:
            cfg: Configuration to merge over the current one before
                configuring (DictConfig or dict)
            sink: Console sink

        Returns:
            Ids of the added handlers
        """
        if cfg is not None:
            config_manager.set_config(cfg)
        logging_cfg = config_manager.get_config().get("logging", DictConfig({}))
        log_level = get_log_level()

        # Replace loguru's default handler (id 0) the first time round;
        # handlers added by the host application are left alone
        if not self._configured:
            try:
                logger.remove(0)
            except ValueError:
                logger.debug("Loguru default handler already removed")
        else:
            self.reset()

        self._handler_ids.append(logger.add(
            sink,
            level=log_level,
            format=self.console_format,
            colorize=sink in (sys.stderr, sys.stdout),
        ))

        log_file = logging_cfg.get("file")
        if log_file:
            # File logging with rotation
            self._handler_ids.append(logger.add(
                log_file,
                rotation=logging_cfg.get("rotation", "10 MB"),
                retention=logging_cfg.get("retention", "1 week"),
                level=log_level,
                format=self.file_format,
                backtrace=True,
                diagnose=True,
            ))

        self._configured = True
        logger.debug(f"Logging configured at level {log_level}: "
                     f"{OmegaConf.to_container(logging_cfg, resolve=True)}")
        return list(self._handler_ids)

    def reset(self) -> None:
        """Remove the handlers added by `configure`."""
        for handler_id in self._handler_ids:
            try:
                logger.remove(handler_id)
            except ValueError:
                logger.warning(f"Logging handler {handler_id} already removed")
        self._handler_ids.clear()
        self._configured = False


# Global logging service instance
_logging_service: Optional[LoggingService] = None


def get_logging_service() -> LoggingService:
    """Get the global logging service instance.

    Returns:
        LoggingService instance
    """
    global _logging_service
    if _logging_service is None:
        _logging_service = LoggingService()
    return _logging_service
