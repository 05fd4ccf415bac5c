import os
from dataclasses import dataclass

from .errors import ConfigError

ENV_PREFIX = 'RFAPI_'

TRUTHY = {'1', 'true', 'yes', 'on'}

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


@dataclass
class Config:
    host: str = '0.0.0.0'
    port: int = 8000
    request_body_max_bytes: int = 1024
    log_level: str = 'INFO'
    docs_path: str = 'docs.json'
    debug: bool = False

    @property
    def bind_address(self):
        return f'{self.host}:{self.port}'

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from RFAPI_* environment variables, falling back to defaults."""
        if environ is None:
            environ = os.environ
        defaults = cls()

        def get(name, default):
            return environ.get(ENV_PREFIX + name, default)

        return cls(
            host=get('HOST', defaults.host),
            port=_int(get('PORT', defaults.port), 'PORT'),
            request_body_max_bytes=_int(
                get('REQUEST_BODY_MAX_BYTES', defaults.request_body_max_bytes),
                'REQUEST_BODY_MAX_BYTES',
            ),
            log_level=_log_level(get('LOG_LEVEL', defaults.log_level)),
            docs_path=get('DOCS_PATH', defaults.docs_path),
            debug=str(get('DEBUG', defaults.debug)).lower() in TRUTHY,
        )


def _int(value, name):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f'{ENV_PREFIX}{name} must be an integer, got {value!r}') from None


def _log_level(value):
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level
