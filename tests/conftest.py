# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for dav_sdk tests."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator

import httpx
import pytest

from dav_sdk.announce import AnnouncementClient
from dav_sdk.broker import InMemoryBrokerSession
from dav_sdk.codec import ParamsCodec
from dav_sdk.entities import SdkContext
from dav_sdk.identity import Identity
from dav_sdk.models import ModelDavConfig, ModelLocation
from dav_sdk.models.drone_delivery import (
    DroneDeliveryNeedFilterParams,
    DroneDeliveryNeedParams,
)
from dav_sdk.registry import RegistryParamsType, build_default_registry

TEST_API_URL = "http://dav-api.test"


class RecordingApi:
    """Records announcement requests and answers them with a fixed status."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json={"ok": self.status_code < 400})

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def body(self, index: int = -1) -> dict[str, object]:
        return json.loads(self.requests[index].content)


@pytest.fixture(autouse=True)
def clean_dav_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DAV_* variables from the developer's shell out of the tests."""
    for name in (
        "DAV_KAFKA_SEED_URLS",
        "DAV_API_SEED_URLS",
        "DAV_CONNECTION_TIMEOUT_SECONDS",
        "DAV_REQUEST_TIMEOUT_SECONDS",
        "DAV_API_TIMEOUT_SECONDS",
        "DAV_AUTO_OFFSET_RESET",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def dav_config() -> ModelDavConfig:
    """Config with short timeouts pointing at test hosts."""
    return ModelDavConfig(
        kafka_seed_urls=("kafka.test:9092",),
        api_seed_urls=(TEST_API_URL,),
        connection_timeout_seconds=0.2,
        request_timeout_seconds=0.2,
        api_timeout_seconds=1.0,
    )


@pytest.fixture
def registry() -> RegistryParamsType:
    return build_default_registry()


@pytest.fixture
def codec(registry: RegistryParamsType) -> ParamsCodec:
    return ParamsCodec(registry)


@pytest.fixture
def recording_api() -> RecordingApi:
    return RecordingApi()


@pytest.fixture
def announcer(dav_config: ModelDavConfig, recording_api: RecordingApi) -> AnnouncementClient:
    return AnnouncementClient(dav_config, transport=httpx.MockTransport(recording_api))


@pytest.fixture
async def inmemory_session() -> AsyncGenerator[InMemoryBrokerSession, None]:
    session = InMemoryBrokerSession()
    yield session
    await session.close()


@pytest.fixture
def sdk_context(
    dav_config: ModelDavConfig,
    inmemory_session: InMemoryBrokerSession,
    codec: ParamsCodec,
    announcer: AnnouncementClient,
) -> SdkContext:
    return SdkContext(
        config=dav_config,
        session=inmemory_session,
        codec=codec,
        announcer=announcer,
    )


@pytest.fixture
def identity(
    dav_config: ModelDavConfig,
    inmemory_session: InMemoryBrokerSession,
    announcer: AnnouncementClient,
    registry: RegistryParamsType,
) -> Identity:
    return Identity(
        "0xidentity",
        "0xdav",
        dav_config,
        session=inmemory_session,
        announcer=announcer,
        registry=registry,
    )


@pytest.fixture
def delivery_need_params() -> DroneDeliveryNeedParams:
    return DroneDeliveryNeedParams(
        pickup_location=ModelLocation(lat=32.05, long=34.78),
        dropoff_location=ModelLocation(lat=32.08, long=34.80),
        cargo_type="parcel",
        weight=1.5,
    )


@pytest.fixture
def delivery_filter_params() -> DroneDeliveryNeedFilterParams:
    return DroneDeliveryNeedFilterParams(
        location=ModelLocation(lat=32.05, long=34.78),
        radius=2000,
    )
