"""Configuration loading and validation package."""

from .loader import load_app_config
from .models import AppConfig, DemoConfig, TelemetryConfig

__all__ = ["AppConfig", "DemoConfig", "TelemetryConfig", "load_app_config"]
