"""YAML loaders for the config subsystem.

Each helper consumes one YAML file, validates it via models.py and returns
typed objects to the caller. A single ``kiku.yml`` may hold both the
``client`` and ``credentials`` sections, or they can live in separate files.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping, Type, TypeVar

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from kiku.core.errors import ConfigurationError

from .models import ClientConfig, CredentialsConfig, KikuConfig

_DEFAULT_CONFIG_DIR = Path("config")

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def _validate(model: Type[ModelT], data: Mapping, path: Path) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ConfigurationError(f"Invalid config in {path}: {exc}") from exc


def load_client_config(path: Path | str = _DEFAULT_CONFIG_DIR / "kiku.yml") -> ClientConfig:
    """Load the ``client`` section (or a bare client mapping) from ``path``."""

    data = _read_yaml(Path(path))
    section = data.get("client", data)
    if not isinstance(section, Mapping):
        raise ConfigurationError("`client` must be a mapping")
    return _validate(ClientConfig, section, Path(path))


def load_credentials_config(path: Path | str = _DEFAULT_CONFIG_DIR / "credentials.yml") -> CredentialsConfig:
    """Load ``login_company_code`` and ``token`` from ``path``.

    Accepts the keys at the root or under a ``credentials`` section.
    """

    data = _read_yaml(Path(path))
    section = data.get("credentials", data)
    if not isinstance(section, Mapping):
        raise ConfigurationError("`credentials` must be a mapping")
    return _validate(CredentialsConfig, section, Path(path))


def load_config(path: Path | str = _DEFAULT_CONFIG_DIR / "kiku.yml") -> KikuConfig:
    """Load a combined config file with ``client`` and ``credentials`` sections."""

    data = _read_yaml(Path(path))
    return _validate(KikuConfig, data, Path(path))
