"""Application configuration for the auction showcase publisher."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict, SettingsError

from auction_showcase.errors import ConfigError

CONFIG_NAME = "config"
CONFIG_SUFFIXES = (".yaml", ".yml", ".json", ".toml")


class AppSettings(BaseModel):
    """Endpoints and credentials shared by every auction."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    authorization_token: str = Field(description="Sent verbatim after 'Basic ' to the publish API")
    bigone_url: str = Field(description="Base URL of the BigONE marketplace API")
    asset_host: str = Field(description="Prefix joined with attachment paths to build media URLs")


class AuctionSettings(BaseModel):
    """One auction to publish."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    uuid: str
    contract_address: str
    token_id: str


class Settings(BaseSettings):
    """File-driven runtime settings, overridable from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="AUCTION_SHOWCASE_",
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings
    auctions: List[AuctionSettings]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; the environment wins over them.
        return env_settings, init_settings


def find_config_file(directory: str | Path = ".") -> Path:
    """Return the first ``config.<ext>`` found in ``directory``."""

    base = Path(directory)
    for suffix in CONFIG_SUFFIXES:
        candidate = base / f"{CONFIG_NAME}{suffix}"
        if candidate.is_file():
            return candidate
    names = ", ".join(f"{CONFIG_NAME}{suffix}" for suffix in CONFIG_SUFFIXES)
    raise ConfigError(f"no config file found in {base.resolve()} (looked for {names})")


def _read_config_file(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc

    try:
        if path.suffix == ".json":
            content = json.loads(text)
        elif path.suffix == ".toml":
            content = tomllib.loads(text)
        else:
            content = yaml.safe_load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"malformed config file {path}: {exc}") from exc

    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise ConfigError(f"config file {path} must contain a mapping, got {type(content).__name__}")
    return content


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from ``path``, or from ``./config.<ext>`` when omitted.

    Any problem with the file or its contents is reported as :class:`ConfigError`.
    """

    config_path = Path(path) if path is not None else find_config_file()
    if not config_path.is_file():
        raise ConfigError(f"config file not found: {config_path}")

    content = _read_config_file(config_path)
    try:
        return Settings(**content)
    except ValidationError as exc:
        raise ConfigError(f"invalid config file {config_path}: {exc}") from exc
    except SettingsError as exc:
        raise ConfigError(f"invalid AUCTION_SHOWCASE_* environment override: {exc}") from exc
