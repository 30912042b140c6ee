#!/usr/bin/env python3
"""
Unified Logging System for the Image Enhancer
Follows FAIL LOUD philosophy - all errors are verbose and visible
"""

import sys
import logging
import logging.handlers
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config_manager import get_config
from .exceptions import LoggingError


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        """Format log record with colors if enabled"""
        log_message = super().format(record)

        if getattr(record, 'color', False):
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            return f"{color}{log_message}{self.COLORS['RESET']}"

        return log_message


class EnhancerLogger:
    """Unified logger for the Image Enhancer"""

    def __init__(self, name: str = "Image-Enhancer", component: Optional[str] = None):
        """Initialize logger

        Args:
            name: Logger name
            component: Pipeline component currently logging (for context)
        """
        self.name = name
        self.component = component or "SYSTEM"
        self.logger = logging.getLogger(name)

        # Only set up if not already configured
        if not self.logger.handlers:
            self._setup_logger()

    def _setup_logger(self):
        """Set up logger with console and file handlers"""
        log_dir = None
        try:
            config = get_config()
            log_config = config.settings.get('logging', {})

            level_str = str(log_config.get('level', 'INFO')).upper()
            self.logger.setLevel(getattr(logging, level_str))

            format_str = log_config.get('format', '[{timestamp}] [{component}] {message}')

            # Console handler
            if log_config.get('console', {}).get('enabled', True):
                console_handler = logging.StreamHandler(sys.stdout)
                console_handler.setFormatter(
                    ColoredFormatter(self._get_format_string(format_str))
                )

                if log_config.get('console', {}).get('color', True) and sys.stdout.isatty():
                    console_handler.addFilter(lambda record: setattr(record, 'color', True) or True)

                self.logger.addHandler(console_handler)

            # File handler
            file_config = log_config.get('file', {})
            if file_config.get('enabled', False):
                log_path = file_config.get(
                    'path',
                    str(Path.home() / '.cache' / 'image-enhancer' / 'logs' / '{date}.log')
                ).format(date=datetime.now().strftime('%Y-%m-%d'))

                log_dir = Path(log_path).parent
                log_dir.mkdir(parents=True, exist_ok=True)

                max_size_mb = file_config.get('max_size_mb', 10)
                backup_count = file_config.get('backup_count', 3)

                file_handler = logging.handlers.RotatingFileHandler(
                    log_path,
                    maxBytes=max_size_mb * 1024 * 1024,
                    backupCount=backup_count,
                    encoding='utf-8'
                )
                file_handler.setFormatter(
                    logging.Formatter(self._get_format_string(format_str))
                )
                self.logger.addHandler(file_handler)

                self.logger.debug(
                    f"Log rotation enabled: max_size={max_size_mb}MB, "
                    f"backup_count={backup_count}",
                    extra={'component': self.component}
                )

        except Exception as e:
            error_detail = f"{str(e)}\nTraceback: {traceback.format_exc()}"
            resolution = "Check configuration and permissions"
            if log_dir:
                resolution = f"Check write permissions for log directory: {log_dir}"
            raise LoggingError(
                "Failed to set up logging",
                error_detail,
                resolution
            )

    def _get_format_string(self, template: str) -> str:
        """Convert template format to Python logging format"""
        format_str = template
        format_str = format_str.replace('{timestamp}', '%(asctime)s')
        format_str = format_str.replace('{component}', '%(component)s')
        format_str = format_str.replace('{message}', '%(message)s')
        format_str = format_str.replace('{level}', '%(levelname)s')

        return format_str

    def _log(self, level: int, message: str, **kwargs):
        """Internal log method with component context"""
        extra = {'component': self.component}
        extra.update(kwargs.pop('extra', {}))

        self.logger.log(level, message, extra=extra, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message"""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exception: Optional[Exception] = None, **kwargs):
        """Log error message - always verbose with full traceback

        Args:
            message: Error message
            exception: Optional exception object for additional context
        """
        error_msg = f"ERROR: {message}"

        if exception:
            error_msg += f"\nException Type: {type(exception).__name__}"
            error_msg += f"\nException Message: {str(exception)}"
            error_msg += f"\nTraceback:\n{traceback.format_exc()}"

        self._log(logging.ERROR, error_msg, **kwargs)

    def set_component(self, component: str):
        """Update the current component context"""
        self.component = component

    def set_level(self, level: str):
        """Override the configured log level (e.g. for --verbose)"""
        self.logger.setLevel(getattr(logging, level.upper()))

    def log_stage(self, stage: str, message: str = ""):
        """Log a pipeline stage transition

        Args:
            stage: Stage name
            message: Optional message
        """
        stage_msg = f">>> Stage: {stage}"
        if message:
            stage_msg += f" - {message}"
        self.info(stage_msg)

    def log_separator(self, char: str = "-", length: int = 50):
        """Log a separator line"""
        self.info(char * length)


# Global logger instance
_logger: Optional[EnhancerLogger] = None


def get_logger(name: Optional[str] = None, component: Optional[str] = None) -> EnhancerLogger:
    """Get logger instance

    Args:
        name: Logger name (uses default if None)
        component: Current component context

    Returns:
        Logger instance
    """
    global _logger

    if _logger is None or name is not None:
        _logger = EnhancerLogger(name or "Image-Enhancer", component)
    elif component is not None:
        _logger.set_component(component)

    return _logger

