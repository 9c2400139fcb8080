# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP announcement client using httpx async client.

Announces topics to the DAV API so that other parties can discover them:
    - publish_need:   POST {api_seed_url}/publishNeed/:{topic_id}
    - needs_for_type: POST {api_seed_url}/needsForType/:{topic_id}

The request body is the params model serialized with its camelCase wire
names. Any non-2xx status or transport failure raises
AnnouncementFailedError. There is no retry.
"""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID, uuid4

import httpx

from dav_sdk.enums import EnumTransportType
from dav_sdk.errors import AnnouncementFailedError, ModelErrorContext
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.models.model_dav_config import ModelDavConfig

logger = logging.getLogger(__name__)


class AnnouncementClient:
    """Announcement endpoint client.

    Without an injected ``client`` every announcement opens its own
    ``httpx.AsyncClient`` and closes it afterwards. An injected client is
    shared and owned by the caller.

    Args:
        config: SDK configuration; the first API seed URL is used.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        client: Optional shared AsyncClient.
    """

    def __init__(
        self,
        config: ModelDavConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = config.api_seed_url
        self._timeout = config.api_timeout_seconds
        self._transport = transport
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def publish_need(self, topic_id: str, params: BasicParams) -> None:
        """Announce a freshly published need on ``topic_id``."""
        await self._post("publishNeed", topic_id, params)

    async def needs_for_type(self, topic_id: str, filter_params: BasicParams) -> None:
        """Register ``topic_id`` to receive needs matching ``filter_params``."""
        await self._post("needsForType", topic_id, filter_params)

    async def _post(self, endpoint: str, topic_id: str, params: BasicParams) -> None:
        correlation_id = uuid4()
        url = f"{self._base_url}/{endpoint}/:{topic_id}"
        body = params.model_dump(mode="json", by_alias=True, exclude_none=True)

        if self._client is not None:
            response = await self._send(self._client, endpoint, url, body, correlation_id)
        else:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
            ) as client:
                response = await self._send(client, endpoint, url, body, correlation_id)

        if not response.is_success:
            logger.warning(
                f"Announcement rejected with HTTP {response.status_code}",
                extra={
                    "url": url,
                    "status_code": response.status_code,
                    "correlation_id": str(correlation_id),
                },
            )
            raise AnnouncementFailedError(
                f"HTTP POST {endpoint} for topic {topic_id} failed with status "
                f"{response.status_code}",
                status_code=response.status_code,
                context=self._context(endpoint, url, correlation_id),
                topic=topic_id,
            )

        logger.debug(
            f"Announced topic {topic_id} via {endpoint}",
            extra={"url": url, "correlation_id": str(correlation_id)},
        )

    async def _send(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        url: str,
        body: dict[str, object],
        correlation_id: UUID,
    ) -> httpx.Response:
        try:
            return await client.post(url, json=body)
        except httpx.TimeoutException as e:
            raise AnnouncementFailedError(
                f"HTTP POST {endpoint} timed out after {self._timeout}s",
                context=self._context(endpoint, url, correlation_id),
                timeout_seconds=self._timeout,
            ) from e
        except httpx.ConnectError as e:
            raise AnnouncementFailedError(
                f"Failed to connect to {url}",
                context=self._context(endpoint, url, correlation_id),
            ) from e
        except httpx.HTTPError as e:
            raise AnnouncementFailedError(
                f"HTTP error during POST {endpoint}: {type(e).__name__}",
                context=self._context(endpoint, url, correlation_id),
            ) from e

    @staticmethod
    def _context(endpoint: str, url: str, correlation_id: UUID) -> ModelErrorContext:
        return ModelErrorContext(
            transport_type=EnumTransportType.HTTP,
            operation=f"http.post.{endpoint}",
            target_name=url,
            correlation_id=correlation_id,
        )


__all__ = ["AnnouncementClient"]
