"""
Enhanced Logging Utilities

Provides structured logging with contextual information for ingestion and
stats runs. Implements hybrid approach: human-readable console + structured
JSON files.
"""
import contextvars
import json
import logging
import os
import time
import uuid
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Dict, Any, Optional

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

ROOT_LOGGER_NAME = 'league_stats'

# Attributes every LogRecord carries; anything else arrived through extra=
_RECORD_ATTRS = frozenset(logging.LogRecord('', logging.INFO, '', 0, '', (), None).__dict__) | {
    'message', 'asctime', 'taskName',
}


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JSONFormatter(logging.Formatter):
    """One JSON object per line: level, logger, message, log context and extras."""

    def format(self, record) -> str:
        log_obj: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info and record.exc_info[0]:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        context = log_context.get({})
        if context:
            log_obj['context'] = dict(context)
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra = {
            key: _json_safe(value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }
        if extra:
            log_obj['extra'] = extra

        return json.dumps(log_obj, ensure_ascii=False) + '\n'


class ContextualLogger:
    """
    Logger wrapper that times one operation at a time.

    While an operation is open every record carries ``duration_ms``; the
    trace id and operation name ride along in the log context so module
    loggers pick them up as well.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._start_time: Optional[float] = None

    def start_operation(self, operation_name: Optional[str] = None) -> str:
        """Start timing an operation; returns its 8-character trace id."""
        self._start_time = time.time()
        trace_id = uuid.uuid4().hex[:8]

        context = dict(log_context.get({}), trace_id=trace_id)
        if operation_name:
            context['operation'] = operation_name
        log_context.set(context)

        return trace_id

    def end_operation(self, trace_id: str, operation_result: str = "completed") -> None:
        """Log the final duration and drop the operation from the log context."""
        duration_ms = self._get_duration_ms()
        if duration_ms is None:
            self.warning("end_operation called without corresponding start_operation")
            return
        self._start_time = None

        self.info(f"Operation {operation_result}",
                  trace_id=trace_id,
                  final_duration_ms=duration_ms,
                  operation_result=operation_result)

        context = dict(log_context.get({}))
        context.pop('operation', None)
        if context.get('trace_id') == trace_id:
            del context['trace_id']
        log_context.set(context)

    def _get_duration_ms(self) -> Optional[int]:
        if self._start_time is None:
            return None
        return int((time.time() - self._start_time) * 1000)

    def _log(self, level: str, message: str, fields: Dict[str, Any], **log_kwargs) -> None:
        duration = self._get_duration_ms()
        if duration is not None:
            fields['duration_ms'] = duration
        getattr(self.logger, level)(message, extra=fields, **log_kwargs)

    def debug(self, message: str, **kwargs):
        self._log('debug', message, kwargs)

    def info(self, message: str, **kwargs):
        self._log('info', message, kwargs)

    def warning(self, message: str, **kwargs):
        self._log('warning', message, kwargs)

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """Log an error; passing ``error`` attaches its type, message and traceback."""
        if error is None:
            self._log('error', message, kwargs)
            return
        kwargs['error'] = {'type': type(error).__name__, 'message': str(error)}
        self._log('error', message, kwargs, exc_info=True)


def set_log_context(
    season: Optional[int] = None,
    game_number: Optional[str] = None,
    player_code: Optional[str] = None,
    **additional_context
):
    """
    Set league-specific context for logging.

    Args:
        season: Season year being processed
        game_number: Game identifier (e.g. '2025201')
        player_code: League player code
        **additional_context: Any additional context to include
    """
    context = log_context.get({}).copy()

    if season:
        context['season'] = season
    if game_number:
        context['game_number'] = game_number
    if player_code:
        context['player_code'] = player_code

    context.update(additional_context)

    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """
    Get a contextual logger instance.

    Args:
        logger_name: Name for the logger (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logger_name)


def setup_logging(log_level: Optional[str] = None, log_dir: Optional[str] = None) -> logging.Logger:
    """Configure hybrid logging: human-readable console + structured JSON files."""
    from config import get_config

    config = get_config()
    level_name = (log_level or config.log_level).upper()
    directory = log_dir or config.log_dir

    os.makedirs(directory, exist_ok=True)

    league_logger = logging.getLogger(ROOT_LOGGER_NAME)
    league_logger.setLevel(getattr(logging, level_name))

    # Console handler - detailed format for development debugging
    console_handler = logging.StreamHandler()
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )
    console_handler.setFormatter(console_formatter)
    league_logger.addHandler(console_handler)

    # JSON file handler - structured logging for monitoring and analysis
    json_handler = RotatingFileHandler(
        os.path.join(directory, f'{ROOT_LOGGER_NAME}.json'),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5
    )
    json_handler.setFormatter(JSONFormatter())
    league_logger.addHandler(json_handler)

    # Module loggers (services.*, api.*) and aiohttp log through the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name))
    if not root_logger.handlers:
        root_logger.addHandler(console_handler)
        root_logger.addHandler(json_handler)

    # Prevent duplicate messages through the root logger
    league_logger.propagate = False

    return league_logger
