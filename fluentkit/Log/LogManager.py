from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union, List, TextIO
from pathlib import Path
from datetime import datetime
import json
import sys


class LogChannel:
    """Laravel-style log channel."""

    def __init__(self, name: str, handler: logging.Handler, level: Union[str, int] = logging.INFO) -> None:
        self.name = name
        self.handler = handler
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.addHandler(handler)
        self.logger.propagate = False

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log info message."""
        self._log(logging.INFO, message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, context)

    def log(self, level: Union[str, int], message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log message at specified level."""
        if isinstance(level, str):
            self._log(getattr(logging, level.upper()), message, context)
        else:
            self._log(level, message, context)

    def _log(self, level: int, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        extra = {'context': context} if context else {}
        self.logger.log(level, message, extra=extra)

    def close(self) -> None:
        """Detach every handler from the channel logger and close its own one."""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
        self.logger.propagate = True
        self.handler.close()


class LaravelFormatter(logging.Formatter):
    """Laravel-style log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')

        log_line = f"[{timestamp}] {record.name}.{record.levelname}: {record.getMessage()}"

        context = getattr(record, 'context', {})
        if context:
            log_line += f" {json.dumps(context, default=str)}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'channel': record.name,
            'message': record.getMessage(),
            'context': getattr(record, 'context', {}),
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


class LogManager:
    """
    Laravel-style log manager.

    Channels are configured by ``fluentkit/config/logging.py``. A channel binds a handler
    to the stdlib logger of the same name, so opening the ``fluent`` channel
    collects everything the ``fluent.*`` library loggers emit.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None) -> None:
        self._config: Dict[str, Any] = dict(config or {})
        self._config.setdefault('channels', {})
        self._channels: Dict[str, LogChannel] = {}
        self._default_channel: str = self._config.get('default', 'fluent')
        self._stream = stream
        self._stack: List[str] = []

    def channel(self, name: Optional[str] = None) -> LogChannel:
        """Get a log channel."""
        if name is None:
            name = self._default_channel

        if name not in self._channels:
            self._create_channel(name)

        return self._channels[name]

    def _create_channel(self, name: str) -> None:
        """Create a new log channel."""
        config = self._config['channels'].get(name, {})
        driver = config.get('driver', 'stderr')

        if driver == 'single':
            self._create_single_channel(name, config)
        elif driver == 'stack':
            self._create_stack_channel(name, config)
        else:
            self._create_stderr_channel(name, config)

    def _create_single_channel(self, name: str, config: Dict[str, Any]) -> None:
        """Create a single file log channel."""
        path = config.get('path', f'storage/logs/{name}.log')
        level = config.get('level', logging.INFO)

        Path(path).parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(path)
        handler.setFormatter(self._get_formatter(config))

        self._channels[name] = LogChannel(name, handler, level)

    def _create_stack_channel(self, name: str, config: Dict[str, Any]) -> None:
        """Create a stack log channel that writes through several channels' handlers."""
        level = config.get('level', logging.INFO)

        self._channels[name] = LogChannel(name, logging.NullHandler(), level)
        stack_logger = self._channels[name].logger

        for channel_name in config.get('channels', []):
            if channel_name == name:
                continue
            for handler in self.channel(channel_name).logger.handlers:
                stack_logger.addHandler(handler)

    def _create_stderr_channel(self, name: str, config: Dict[str, Any]) -> None:
        """Create a stream log channel (stderr unless a stream was injected)."""
        level = config.get('level', logging.INFO)

        handler = logging.StreamHandler(self._stream or sys.stderr)
        handler.setFormatter(self._get_formatter(config))

        self._channels[name] = LogChannel(name, handler, level)

    def _get_formatter(self, config: Dict[str, Any]) -> logging.Formatter:
        if config.get('formatter', 'laravel') == 'json':
            return JsonFormatter()
        return LaravelFormatter()

    def stack(self, channels: List[str], channel: Optional[str] = None) -> LogChannel:
        """Create a stack of channels."""
        if channel is None:
            channel = f"stack_{len(self._stack)}"

        self._config['channels'][channel] = {
            'driver': 'stack',
            'channels': channels
        }
        self._stack.append(channel)
        self._create_channel(channel)

        return self._channels[channel]

    def build(self, config: Dict[str, Any]) -> LogChannel:
        """Build a custom log channel."""
        name = f"custom_{len(self._channels)}"

        self._config['channels'][name] = config
        self._create_channel(name)

        return self._channels[name]

    def get_default_driver(self) -> str:
        """Get the default log channel name."""
        return self._default_channel

    def set_default_driver(self, name: str) -> None:
        """Set the default log channel name."""
        self._default_channel = name

    def get_channels(self) -> Dict[str, LogChannel]:
        """Get all channels."""
        return self._channels

    def forget_channel(self, name: str) -> None:
        """Remove a channel and detach its handler."""
        channel = self._channels.pop(name, None)
        if channel is not None:
            channel.close()

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message to default channel."""
        self.channel().debug(message, context)

    def info(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log info message to default channel."""
        self.channel().info(message, context)

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message to default channel."""
        self.channel().warning(message, context)

    def error(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """Log error message to default channel."""
        self.channel().error(message, context)


# Global log manager instance
log_manager_instance: Optional[LogManager] = None


def get_log_manager() -> LogManager:
    """Get the global log manager instance, configured from ``fluentkit/config/logging.py``."""
    global log_manager_instance
    if log_manager_instance is None:
        from fluentkit.Support.Config import config
        log_manager_instance = LogManager({
            'default': config.get('fluent.log_channel', config.get('logging.default', 'fluent')),
            'channels': config.get('logging.channels', {}),
        })
    return log_manager_instance


def logger(channel: Optional[str] = None) -> LogChannel:
    """Get a log channel."""
    return get_log_manager().channel(channel)
