# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SDK configuration model.

Environment Variables:
    All variables are optional and fall back to the field defaults.

    DAV_KAFKA_SEED_URLS: Kafka broker addresses (comma-separated, first is used)
        Default: "localhost:9092"
    DAV_API_SEED_URLS: Announcement API base URLs (comma-separated, first is used)
        Default: "http://localhost:8080"
    DAV_CONNECTION_TIMEOUT_SECONDS: Bound on broker connection bring-up
        Default: 4.5
    DAV_REQUEST_TIMEOUT_SECONDS: Bound on topic creation and produce requests
        Default: 4.5
    DAV_API_TIMEOUT_SECONDS: Bound on announcement HTTP calls
        Default: 10.0
    DAV_AUTO_OFFSET_RESET: Where a new consumer group starts reading
        Default: "earliest"
        Options: "earliest", "latest"
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from dav_sdk.errors import ConfigurationError, ModelErrorContext

logger = logging.getLogger(__name__)

DEFAULT_KAFKA_SEED_URL = "localhost:9092"
DEFAULT_API_SEED_URL = "http://localhost:8080"
DEFAULT_CONNECTION_TIMEOUT_SECONDS = 4.5
DEFAULT_REQUEST_TIMEOUT_SECONDS = 4.5

_ENV_OVERRIDES: dict[str, str] = {
    "kafka_seed_urls": "DAV_KAFKA_SEED_URLS",
    "api_seed_urls": "DAV_API_SEED_URLS",
    "connection_timeout_seconds": "DAV_CONNECTION_TIMEOUT_SECONDS",
    "request_timeout_seconds": "DAV_REQUEST_TIMEOUT_SECONDS",
    "api_timeout_seconds": "DAV_API_TIMEOUT_SECONDS",
    "auto_offset_reset": "DAV_AUTO_OFFSET_RESET",
}
_LIST_FIELDS = frozenset({"kafka_seed_urls", "api_seed_urls"})


class ModelDavConfig(BaseModel):
    """Configuration shared by every identity, entity and broker session.

    Only the first entry of each seed list is used; the lists exist so a
    deployment can ship its full broker and API inventory in one place.

    Example:
        ```python
        config = ModelDavConfig(
            kafka_seed_urls=("kafka:9092",),
            api_seed_urls=("https://api.dav.network",),
        )
        config = ModelDavConfig.default()
        config = ModelDavConfig.from_yaml(Path("dav.yaml"))
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kafka_seed_urls: tuple[str, ...] = Field(
        default=(DEFAULT_KAFKA_SEED_URL,),
        description="Kafka bootstrap addresses, first entry is used",
    )
    api_seed_urls: tuple[str, ...] = Field(
        default=(DEFAULT_API_SEED_URL,),
        description="Announcement API base URLs, first entry is used",
    )
    connection_timeout_seconds: float = Field(
        default=DEFAULT_CONNECTION_TIMEOUT_SECONDS,
        gt=0,
        le=300,
        description="Bound on broker connection bring-up",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT_SECONDS,
        gt=0,
        le=300,
        description="Bound on topic creation and produce requests",
    )
    api_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=300,
        description="Bound on announcement HTTP calls",
    )
    auto_offset_reset: Literal["earliest", "latest"] = Field(
        default="earliest",
        description="Starting offset for a consumer group with no committed offset",
    )
    topic_partitions: int = Field(default=1, ge=1)
    topic_replication_factor: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _validate_seed_urls(self) -> ModelDavConfig:
        for field_name in _LIST_FIELDS:
            urls = getattr(self, field_name)
            if not urls or not all(url.strip() for url in urls):
                raise ConfigurationError(
                    f"{field_name} must contain at least one non-empty address",
                    context=ModelErrorContext.with_correlation(
                        operation="validate_config",
                        target_name="dav_config",
                    ),
                    parameter=field_name,
                )
        return self

    @property
    def kafka_seed_url(self) -> str:
        """Bootstrap address used for every broker connection."""
        return self.kafka_seed_urls[0]

    @property
    def api_seed_url(self) -> str:
        """Base URL used for announcement calls, without trailing slash."""
        return self.api_seed_urls[0].rstrip("/")

    @classmethod
    def default(cls) -> ModelDavConfig:
        """Create a config from field defaults with environment overrides."""
        return cls._build({})

    @classmethod
    def from_yaml(cls, path: Path) -> ModelDavConfig:
        """Load a config from a YAML file, then apply environment overrides.

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the YAML is invalid or not a mapping
        """
        with path.open() as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in config file: {e}",
                    context=ModelErrorContext.with_correlation(
                        operation="load_config",
                        target_name=str(path),
                    ),
                ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file must contain a mapping, got {type(data).__name__}",
                context=ModelErrorContext.with_correlation(
                    operation="load_config",
                    target_name=str(path),
                ),
            )

        logger.debug("Loaded DAV config file", extra={"path": str(path)})
        return cls._build(data)

    @classmethod
    def _build(cls, values: dict[str, object]) -> ModelDavConfig:
        merged = dict(values)
        for field_name, env_name in _ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None or not raw.strip():
                continue
            if field_name in _LIST_FIELDS:
                merged[field_name] = tuple(
                    part.strip() for part in raw.split(",") if part.strip()
                )
            else:
                merged[field_name] = raw.strip()

        for field_name in _LIST_FIELDS:
            if isinstance(merged.get(field_name), str):
                merged[field_name] = (merged[field_name],)

        try:
            return cls.model_validate(merged)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid DAV configuration: {e.error_count()} error(s)",
                context=ModelErrorContext.with_correlation(
                    operation="load_config",
                    target_name="dav_config",
                ),
                errors=[err["loc"] for err in e.errors()],
            ) from e


__all__ = ["ModelDavConfig"]
