"""
Loguru sinks and the shared bound logger.

Everything goes to stdout; a rotating file sink is added under LOG_DIR (or TEST_LOG_DIR)
when DEBUG or LOG_TO_FILE is set. Standard `logging` records from uvicorn, SQLAlchemy and
httpx are routed through the same format.
"""

from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import re
import sys
import zoneinfo

from loguru import logger as loguru_logger

from src.platform.config.core_setting import settings
from src.platform.logging.service_context import get_service_context


SENSITIVE_KEYWORDS = {
    'password',
    'plain_password',
    'hashed_password',
    'token',
    'access_token',
    'secret',
    'api_key',
    'authorization',
}
MASK = '********'
DEPTH_LINE = '│ '
MAX_CONTENT_LENGTH = 1000

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# '127.0.0.1:53412 - "POST /api/reservation HTTP/1.1" 200'
_ACCESS_LOG_STATUS = re.compile(r' - "[A-Z]+ \S+ HTTP/[\d.]+" (\d{3})')
_QUIET_DEBUG_LOGGERS = ('asyncio', 'aiosqlite', 'httpcore')


def access_log_level(message: str) -> str | None:
    """Level for a uvicorn access line by status class, None for anything else."""
    match = _ACCESS_LOG_STATUS.search(message)
    if not match:
        return None
    code = int(match.group(1))
    if code >= 500:
        return 'CRITICAL'
    if code >= 400:
        return 'ERROR'
    if code >= 300:
        return 'WARNING'
    return 'SUCCESS'


def _default_extra() -> dict[str, str]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_QUIET_DEBUG_LOGGERS):
            return

        message = record.getMessage()
        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Walk back out of the logging module so file/line point at the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'


def _log_file_path() -> str:
    now_local = datetime.now(zoneinfo.ZoneInfo(settings.LOG_TIMEZONE))
    if settings.TEST_LOG_DIR:
        return f'{settings.TEST_LOG_DIR}/test_{now_local:%Y-%m-%d_%H}.log'
    return f'{settings.LOG_DIR}/{now_local:%Y-%m-%d_%H}.log'


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())
custom_logger.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

if settings.DEBUG or settings.LOG_TO_FILE:
    custom_logger.add(
        _log_file_path(),
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
