"""Process label stamped on every log line: `service@environment:instance`."""

from functools import lru_cache
import os
import socket

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    if settings.DEPLOY_ENV == 'local_dev':
        instance = str(os.getpid())
    else:
        # Container platforms set HOSTNAME to the container id
        instance = (os.getenv('HOSTNAME') or socket.gethostname())[:12]
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{instance}'
