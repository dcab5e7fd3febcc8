"""
Configuration store settings.

All settings are configurable via environment variables with CONFSTORE_ prefix.
"""

import codecs
import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..constants import DEFAULT_ENCODING, DEFAULT_HEADER, DEFAULT_PROPERTIES_PATH
from ..utils.env_utils import parse_bool_env, parse_str_env

logger = logging.getLogger(__name__)


class StoreConfig(BaseSettings):
    """Settings that control how the store persists itself."""

    default_path: str = Field(
        default=DEFAULT_PROPERTIES_PATH,
        description="File used by save/load when no path is given",
    )
    header: str = Field(
        default=DEFAULT_HEADER,
        description="Comment written at the top of saved files",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding for saved and loaded files",
    )
    write_timestamp: bool = Field(
        default=True,
        description="Write a timestamp comment line under the header",
    )

    class Config:
        env_prefix = "CONFSTORE_"
        case_sensitive = False

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables."""
        return cls(
            default_path=parse_str_env("CONFSTORE_DEFAULT_PATH", DEFAULT_PROPERTIES_PATH),
            header=parse_str_env("CONFSTORE_HEADER", DEFAULT_HEADER),
            encoding=parse_str_env("CONFSTORE_ENCODING", DEFAULT_ENCODING),
            write_timestamp=parse_bool_env("CONFSTORE_WRITE_TIMESTAMP", True),
        )


# Singleton config instance
_config: Optional[StoreConfig] = None


def get_store_config() -> StoreConfig:
    """Get the store config singleton."""
    global _config
    if _config is None:
        _config = StoreConfig.from_env()
        logger.debug(f"Store config loaded: {_config.model_dump()}")
    return _config


def reset_store_config() -> None:
    """Reset the config singleton (for testing)."""
    global _config
    _config = None
