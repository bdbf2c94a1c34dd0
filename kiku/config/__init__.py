"""Configuration loading and validation package."""

from .loader import load_client_config, load_config, load_credentials_config
from .models import ClientConfig, CredentialsConfig, KikuConfig

__all__ = [
    "ClientConfig",
    "CredentialsConfig",
    "KikuConfig",
    "load_client_config",
    "load_config",
    "load_credentials_config",
]
