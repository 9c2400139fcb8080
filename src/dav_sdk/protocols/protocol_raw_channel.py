# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Protocol definitions for raw broker consumption channels.

A raw channel is what ``BrokerSession.open_consumer`` hands back: an async
iterable of records with a ``topic`` and a ``value`` (bytes), plus ``stop()``
to release the underlying connection. ``aiokafka.AIOKafkaConsumer`` satisfies
it directly; the in-memory broker ships its own implementation.

Stopping a channel ends iteration normally (``StopAsyncIteration``), which is
how closing a stream terminates it.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolRawRecord(Protocol):
    """A single record delivered by a raw channel."""

    @property
    def topic(self) -> str:
        """Topic the record was consumed from."""
        ...

    @property
    def value(self) -> bytes | None:
        """Raw payload bytes."""
        ...


@runtime_checkable
class ProtocolRawChannel(Protocol):
    """Push-driven source of raw records for one topic."""

    def __aiter__(self) -> AsyncIterator[ProtocolRawRecord]:
        """Iterate records in broker delivery order."""
        ...

    async def stop(self) -> None:
        """Release the channel; pending iteration ends normally."""
        ...


__all__ = ["ProtocolRawChannel", "ProtocolRawRecord"]
