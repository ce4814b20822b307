import json
from pathlib import Path
from typing import Annotated, List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Outlet Marketplace'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    ALGORITHM: str = 'HS256'

    # CORS (the web front end is hosted separately, so default to permissive)
    # NoDecode: env values arrive raw, either `*`, `a,b` or a JSON list
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()] or ['*']
        return v

    # Database
    DATABASE_URL: Optional[str] = None  # Full async URL, overrides POSTGRES_* when set
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'marketplace'
    POSTGRES_PORT: int = 5432
    POSTGRES_REPLICA_SERVER: Optional[str] = None
    POSTGRES_REPLICA_PORT: Optional[int] = None

    # Connection pool
    DB_POOL_SIZE_WRITE: int = 10
    DB_POOL_SIZE_READ: int = 20
    DB_POOL_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_READ_URL_ASYNC(self) -> str:
        if self.DATABASE_URL or not self.POSTGRES_REPLICA_SERVER:
            return self.DATABASE_URL_ASYNC
        password = self.POSTGRES_PASSWORD.get_secret_value()
        port = self.POSTGRES_REPLICA_PORT or self.POSTGRES_PORT
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_REPLICA_SERVER}:{port}/{self.POSTGRES_DB}'

    # Email notification
    EMAIL_BACKEND: str = 'resend'  # 'resend' or 'mock'
    RESEND_API_KEY: SecretStr = SecretStr('')
    RESEND_API_URL: str = 'https://api.resend.com/emails'
    RESEND_DOMAIN: str = 'resend.dev'
    EMAIL_SENDER_NAME: str = 'Publicitta'
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # Display
    CURRENCY_SUFFIX: str = '€'

    # Logging (file sink only when DEBUG or LOG_TO_FILE)
    SERVICE_NAME: str = 'marketplace-api'
    DEPLOY_ENV: str = 'local_dev'
    LOG_DIR: Path = _PROJECT_ROOT / 'logs'
    TEST_LOG_DIR: Optional[Path] = None
    LOG_TIMEZONE: str = 'Europe/Madrid'
    LOG_TO_FILE: bool = False

    # Tracing
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None
    OTEL_CONSOLE_EXPORT: bool = False

    @property
    def EMAIL_FROM_ADDRESS(self) -> str:
        return f'{self.EMAIL_SENDER_NAME} <noreply@{self.RESEND_DOMAIN}>'


settings = Settings()  # type: ignore
