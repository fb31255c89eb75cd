"""Configuration loading and validation.

This module is responsible for:

- Loading `.env` into the process environment (without overriding existing vars).
- Converting environment variables into a typed Pydantic model for the Splunk sink.
- Validating required fields and providing actionable error messages.
"""

import os

import dotenv
from pydantic import BaseModel, Field


def _get_required_env(name: str) -> str:
    """Read a required env var or raise a helpful error."""
    value = os.getenv(name, "").strip()
    if not value:
        raise ValueError(f"{name} is required. Please set it in your .env file.")
    if value.startswith("your_") and value.endswith("_here"):
        raise ValueError(f"{name} is required. Please replace the placeholder value in your .env file.")
    return value


def _get_optional_env(name: str) -> str:
    """Read an optional env var, defaulting to an empty string."""
    return os.getenv(name, "").strip()


class SplunkConfig(BaseModel):
    """Connection and deployment details for the Splunk HTTP Event Collector.

    Every field may be empty: the sink sends whatever it is given and lets the
    request fail, so strict checks live in `load_config()` rather than here.
    """

    index: str = Field(default="", description="Splunk index")
    token: str = Field(default="", description="HEC token")
    endpoint: str = Field(default="", description="HEC endpoint URL")
    host: str = Field(default="", description="Host reported on each event")
    namespace: str = Field(default="", description="Namespace reported on each event")
    pod: str = Field(default="", description="Pod name reported on each event")


class Config(BaseModel):
    """Top-level application configuration."""

    splunk: SplunkConfig = Field(..., description="Splunk configuration")


def load_config() -> Config:
    """Load application configuration from environment variables.

    Notes:
    - Calls `dotenv.load_dotenv()` so local `.env` values are visible to the process.
    - `SPLUNK_INDEX`, `SPLUNK_TOKEN` and `SPLUNK_ENDPOINT` are required; `HOST`,
      `NAMESPACE` and `POD_NAME` default to empty strings.
    - Raises `ValueError` with actionable messages when required configuration is
      missing or still contains placeholder values.
    """
    dotenv.load_dotenv()

    splunk = SplunkConfig(
        index=_get_required_env("SPLUNK_INDEX"),
        token=_get_required_env("SPLUNK_TOKEN"),
        endpoint=_get_required_env("SPLUNK_ENDPOINT"),
        host=_get_optional_env("HOST"),
        namespace=_get_optional_env("NAMESPACE"),
        pod=_get_optional_env("POD_NAME"),
    )
    return Config(splunk=splunk)
