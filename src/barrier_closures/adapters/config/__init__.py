"""Configuration adapters."""

from barrier_closures.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
