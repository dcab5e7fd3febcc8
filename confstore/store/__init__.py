"""Shared configuration store and its properties-file persistence."""

from .config import StoreConfig, get_store_config, reset_store_config
from .manager import ConfigurationManager, Setting, get_configuration_manager
from .properties import dump_properties, parse_properties

__all__ = [
    "StoreConfig",
    "get_store_config",
    "reset_store_config",
    "ConfigurationManager",
    "Setting",
    "get_configuration_manager",
    "dump_properties",
    "parse_properties",
]
