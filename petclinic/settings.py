"""宠物诊所运行配置.

所有环境变量只在这里读取: ``Settings.load()`` 先通过 python-dotenv 加载可选的
``.env``,再由 pydantic-settings 解析并校验.``create_app(settings=...)`` 只接收
Settings 对象.

生产环境要求显式提供 SECRET_KEY 与 DATABASE_URL;其他环境缺省时分别生成随机
密钥、回退到本地 SQLite 文件.
"""

from __future__ import annotations

import logging
import secrets
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from petclinic.constants.validation_limits import LOG_BACKUP_COUNT_MIN

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"
SQLITE_FALLBACK_PATH = PROJECT_ROOT / "userdata" / "petclinic_dev.db"

APP_VERSION = "1.0.0"

_PRODUCTION = "production"
_TESTING_ALIASES = frozenset({"testing", "test"})
_ALLOWED_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# 非 SQLite 连接池参数
_POOL_RECYCLE_SECONDS = 300
_POOL_MAX_OVERFLOW = 10


class Settings(BaseSettings):
    """应用运行时设置."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default="development", validation_alias="FLASK_ENV")
    debug: bool = Field(default=False, validation_alias="FLASK_DEBUG")

    app_name: str = Field(default="宠物诊所", validation_alias="APP_NAME")
    app_version: str = APP_VERSION
    secret_key: str = Field(default="", validation_alias="SECRET_KEY")

    database_url: str = Field(default="", validation_alias="DATABASE_URL")
    db_connection_timeout_seconds: int = Field(default=30, validation_alias="DB_CONNECTION_TIMEOUT")
    db_max_connections: int = Field(default=20, validation_alias="DB_MAX_CONNECTIONS")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="userdata/logs/app.log", validation_alias="LOG_FILE")
    log_max_size_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="LOG_MAX_SIZE")
    log_backup_count: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    session_lifetime_seconds: int = Field(default=3600, validation_alias="PERMANENT_SESSION_LIFETIME")
    csrf_enabled: bool = Field(default=True, validation_alias="WTF_CSRF_ENABLED")
    seed_demo_data: bool = Field(default=False, validation_alias="SEED_DEMO_DATA")
    trusted_proxy_count: int = Field(default=1, validation_alias="TRUSTED_PROXY_COUNT")

    @field_validator("environment")
    @classmethod
    def _normalize_environment(cls, value: str) -> str:
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def load(cls) -> Settings:
        """读取 ``.env``(若存在)与环境变量并完成校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @property
    def is_production(self) -> bool:
        return self.environment == _PRODUCTION

    @property
    def is_testing(self) -> bool:
        return self.environment in _TESTING_ALIASES

    @property
    def sqlalchemy_engine_options(self) -> dict[str, object]:
        """SQLAlchemy engine 参数,SQLite 不设置连接池大小."""
        if self.database_url.startswith("sqlite"):
            return {"pool_pre_ping": True, "connect_args": {"check_same_thread": False}}
        return {
            "pool_pre_ping": True,
            "pool_recycle": _POOL_RECYCLE_SECONDS,
            "pool_timeout": self.db_connection_timeout_seconds,
            "pool_size": self.db_max_connections,
            "max_overflow": _POOL_MAX_OVERFLOW,
            "echo": self.debug,
        }

    def to_flask_config(self) -> dict[str, object]:
        """映射为 ``app.config`` 键值."""
        return {
            "ENV": self.environment,
            "DEBUG": self.debug,
            "TESTING": self.is_testing,
            "APP_NAME": self.app_name,
            "APP_VERSION": self.app_version,
            "SECRET_KEY": self.secret_key,
            "SQLALCHEMY_DATABASE_URI": self.database_url,
            "SQLALCHEMY_TRACK_MODIFICATIONS": False,
            "SQLALCHEMY_ENGINE_OPTIONS": self.sqlalchemy_engine_options,
            "LOG_LEVEL": self.log_level,
            "LOG_FILE": self.log_file,
            "LOG_MAX_SIZE": self.log_max_size_bytes,
            "LOG_BACKUP_COUNT": self.log_backup_count,
            "PERMANENT_SESSION_LIFETIME": self.session_lifetime_seconds,
            "WTF_CSRF_ENABLED": self.csrf_enabled,
            "SEED_DEMO_DATA": self.seed_demo_data,
        }

    @model_validator(mode="after")
    def _fill_defaults_and_validate(self) -> Settings:
        # frozen model: 派生默认值只能通过 object.__setattr__ 写入
        if "debug" not in self.model_fields_set:
            object.__setattr__(self, "debug", self.environment == "development")

        if not self.secret_key:
            if self.is_production:
                raise ValueError("SECRET_KEY environment variable must be set in production")
            object.__setattr__(self, "secret_key", secrets.token_urlsafe(32))
            if self.debug:
                logger.warning("开发环境使用随机生成的 SECRET_KEY,会话在重启后失效")

        if not self.database_url:
            if self.is_production:
                raise ValueError("DATABASE_URL environment variable must be set in production")
            object.__setattr__(self, "database_url", f"sqlite:///{SQLITE_FALLBACK_PATH.absolute()}")
            if not self.is_testing:
                logger.warning("未设置 DATABASE_URL,回退到本地 SQLite: %s", SQLITE_FALLBACK_PATH.name)

        self._check_ranges()
        return self

    def _check_ranges(self) -> None:
        problems = [
            message
            for message, violated in (
                ("DB_CONNECTION_TIMEOUT 必须为正整数", self.db_connection_timeout_seconds <= 0),
                ("DB_MAX_CONNECTIONS 必须为正整数", self.db_max_connections <= 0),
                ("PERMANENT_SESSION_LIFETIME 必须为正整数(秒)", self.session_lifetime_seconds <= 0),
                ("LOG_LEVEL 仅支持 DEBUG/INFO/WARNING/ERROR/CRITICAL", self.log_level not in _ALLOWED_LOG_LEVELS),
                ("LOG_MAX_SIZE 必须为正整数(字节)", self.log_max_size_bytes <= 0),
                ("LOG_BACKUP_COUNT 必须为非负整数", self.log_backup_count < LOG_BACKUP_COUNT_MIN),
                ("TRUSTED_PROXY_COUNT 必须为非负整数", self.trusted_proxy_count < 0),
                ("生产环境不应开启 SEED_DEMO_DATA", self.is_production and self.seed_demo_data),
            )
            if violated
        ]
        if problems:
            raise ValueError(f"配置校验失败: {'; '.join(problems)}")
