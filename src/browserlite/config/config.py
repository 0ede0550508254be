"""
Configuration management for browserlite using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class BrowserConfig(BaseModel):
    """Where the remote-debugging browser lives and how long to wait for it."""

    host: str = Field(default="localhost", description="Host of the remote debugging endpoint.")
    port: int = Field(default=9222, ge=1, le=65535, description="Chrome --remote-debugging-port.")
    connect_timeout: float = Field(default=5.0, gt=0, description="Seconds to wait for the CDP connection.")
    navigation_timeout: float = Field(default=30.0, gt=0, description="Seconds allowed for `nav` page loads.")
    content_navigation_timeout: float = Field(
        default=10.0, gt=0, description="Seconds allowed for page loads before content extraction."
    )
    user_data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".cache" / "browser-automation-lite",
        description="Chrome --user-data-dir used by `start`.",
    )
    chrome_executable: Path | None = Field(default=None, description="Explicit Chrome/Chromium binary.")
    startup_retries: int = Field(default=30, ge=1, description="Readiness probes after launching Chrome.")
    startup_interval: float = Field(default=0.5, gt=0, description="Seconds between readiness probes.")

    @property
    def endpoint(self) -> str:
        return f"http://{self.host}:{self.port}"


class ExtractionSettings(BaseModel):
    """Configuration for the content extraction pipeline."""

    min_content_length: int = Field(
        default=100, ge=0, description="Minimum characters of extracted content to accept."
    )
    parser: str = Field(default="lxml", description="BeautifulSoup tree builder.")
    min_text_length: int = Field(default=25, ge=0, description="readability-lxml minimum paragraph length.")
    retry_length: int = Field(default=250, ge=0, description="readability-lxml length before a lenient retry.")

    @field_validator("parser")
    @classmethod
    def validate_parser(cls, v: str) -> str:
        """Restrict to tree builders BeautifulSoup ships with or we depend on."""
        if v not in ("lxml", "html.parser"):
            raise ValueError("parser must be 'lxml' or 'html.parser'")
        return v


class SearchConfig(BaseModel):
    """Configuration for the `search` command."""

    default_results: int = Field(default=5, ge=1)
    max_results: int = Field(default=100, ge=1)
    content_chars: int = Field(default=5000, ge=1, description="Characters of article content shown per result.")
    page_timeout: float = Field(default=10.0, gt=0, description="Seconds allowed per result page load.")


class TimeoutConfig(BaseModel):
    """Global per-command deadlines in seconds."""

    content: float = Field(default=30.0, gt=0)
    search: float = Field(default=60.0, gt=0)


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to stderr.")
    json_logs: bool = Field(default=False, description="Render console logs as JSON.")

    @field_validator("log_level")
    @classmethod
    def normalise_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    search: SearchConfig = Field(default_factory=SearchConfig)
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="BROWSERLITE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
        return cls.model_validate(yaml_data or {})


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("browserlite.yaml", "browserlite.yml"):
        path = current_dir / name
        if path.is_file():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path``, a discovered file, or defaults plus environment."""
    config_path = path or find_config_file()
    if config_path is None:
        return Config()
    return Config.from_yaml(config_path)
