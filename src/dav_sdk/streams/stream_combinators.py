# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Stream combinators.

Generic operators for building derived streams. Every combinator keeps the
topic id of its source, so a stream of missions built from a stream of
mission params still reports the home topic it consumes.

Operators:
    - map_stream(stream, fn): synchronous element-wise transform
    - from_awaitable(awaitable, topic): a stream of exactly one element
    - merge_all(stream_of_streams): concurrent merge of inner streams
    - flat_map_merge(stream, afn): async element-wise transform, flattened

``flat_map_merge`` emits in completion order of the async steps, not in
arrival order. Two steps started in order A, B may emit B before A.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

from dav_sdk.streams.topic_stream import TopicStream

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_VALUE = "value"
_ERROR = "error"
_DONE = "done"


class _MappedStream(TopicStream[U]):
    def __init__(self, source: TopicStream[T], fn: Callable[[T], U]) -> None:
        super().__init__(source.topic)
        self._source = source
        self._fn = fn

    async def _iterate(self) -> AsyncIterator[U]:
        async for item in self._source:
            yield self._fn(item)

    async def close(self) -> None:
        await self._source.close()


class _AwaitableStream(TopicStream[T]):
    def __init__(self, awaitable: Awaitable[T], topic: str) -> None:
        super().__init__(topic)
        self._awaitable = awaitable

    async def _iterate(self) -> AsyncIterator[T]:
        yield await self._awaitable

    async def close(self) -> None:
        # An unawaited coroutine would otherwise warn on garbage collection.
        if not self.is_consumed and inspect.iscoroutine(self._awaitable):
            self._awaitable.close()


class _MergedStream(TopicStream[T]):
    def __init__(self, source: TopicStream[TopicStream[T]]) -> None:
        super().__init__(source.topic)
        self._source = source
        self._inner: list[TopicStream[T]] = []

    async def _iterate(self) -> AsyncIterator[T]:
        queue: asyncio.Queue[tuple[str, object]] = asyncio.Queue()
        tasks: set[asyncio.Task[None]] = set()
        active = 1

        async def pump_inner(inner: TopicStream[T]) -> None:
            try:
                async for item in inner:
                    queue.put_nowait((_VALUE, item))
            except Exception as e:
                queue.put_nowait((_ERROR, e))
            finally:
                queue.put_nowait((_DONE, None))

        async def pump_outer() -> None:
            nonlocal active
            try:
                async for inner in self._source:
                    self._inner.append(inner)
                    active += 1
                    tasks.add(asyncio.create_task(pump_inner(inner)))
            except Exception as e:
                queue.put_nowait((_ERROR, e))
            finally:
                queue.put_nowait((_DONE, None))

        tasks.add(asyncio.create_task(pump_outer()))
        try:
            while active:
                kind, payload = await queue.get()
                if kind == _DONE:
                    active -= 1
                elif kind == _ERROR:
                    raise payload  # type: ignore[misc]
                else:
                    yield payload  # type: ignore[misc]
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            await self.close()

    async def close(self) -> None:
        await self._source.close()
        for inner in self._inner:
            await inner.close()


def map_stream(stream: TopicStream[T], fn: Callable[[T], U]) -> TopicStream[U]:
    """Apply ``fn`` to every element of ``stream``.

    Errors and completion of ``stream`` pass through unchanged.
    """
    return _MappedStream(stream, fn)


def from_awaitable(awaitable: Awaitable[T], topic: str) -> TopicStream[T]:
    """Lift an awaitable into a one-element stream tagged with ``topic``."""
    return _AwaitableStream(awaitable, topic)


def merge_all(streams: TopicStream[TopicStream[T]]) -> TopicStream[T]:
    """Merge a stream of streams, emitting inner elements as they arrive.

    The merged stream completes once the outer stream and every inner stream
    have completed. The first error from any of them terminates it and
    cancels the rest.
    """
    return _MergedStream(streams)


def flat_map_merge(
    stream: TopicStream[T], afn: Callable[[T], Awaitable[U]]
) -> TopicStream[U]:
    """Map every element through the async ``afn`` and merge the results.

    Equivalent to ``merge_all(map_stream(stream, lambda x:
    from_awaitable(afn(x), stream.topic)))``.
    """
    topic = stream.topic
    return merge_all(map_stream(stream, lambda item: from_awaitable(afn(item), topic)))


__all__ = ["flat_map_merge", "from_awaitable", "map_stream", "merge_all"]
