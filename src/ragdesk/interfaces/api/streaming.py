"""Token relay between an upstream generator and the HTTP response."""

import asyncio
import logging
from typing import Any

from ragdesk.application.ports import TokenStream
from ragdesk.domain.exceptions import StreamingError

logger = logging.getLogger(__name__)

DISCONNECT_EVENT_KEY = "ragdesk.disconnected"

_DONE = object()
_GONE = object()


class _Failure:
    def __init__(self, error: BaseException) -> None:
        self.error = error


class DisconnectWatcher:
    """ASGI wrapper that notices when an HTTP client goes away.

    Once the response has started, a task reads ``receive`` until
    ``http.disconnect`` and sets the ``asyncio.Event`` stored in the scope
    under ``DISCONNECT_EVENT_KEY``. Servers turn ``send`` into a no-op for
    a vanished client, so a plain ``resp.stream`` would otherwise never
    learn about it. The request body must be read before streaming starts.
    """

    def __init__(self, app: Any) -> None:
        self._app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self._app(scope, receive, send)
            return

        disconnected = asyncio.Event()
        scope[DISCONNECT_EVENT_KEY] = disconnected
        watcher: asyncio.Task | None = None

        async def watch_disconnect() -> None:
            while True:
                message = await receive()
                if message["type"] == "http.disconnect":
                    disconnected.set()
                    return

        async def send_and_watch(message: dict[str, Any]) -> None:
            nonlocal watcher
            if message["type"] == "http.response.start" and watcher is None:
                watcher = asyncio.create_task(watch_disconnect())
            await send(message)

        try:
            await self._app(scope, receive, send_and_watch)
        finally:
            if watcher is not None:
                watcher.cancel()
                try:
                    await watcher
                except asyncio.CancelledError:
                    pass


class TokenRelay:
    """Async iterator of encoded tokens fed through a bounded queue.

    A producer task pulls from ``source`` and the consumer (Falcon, via
    ``resp.stream``) writes each item as soon as it is queued. The relay
    closes itself when ``disconnected`` is set; ``close()`` stops the
    producer and closes ``source`` so an abandoned response does not keep
    consuming the upstream.
    """

    def __init__(
        self,
        source: TokenStream,
        buffer_size: int = 32,
        disconnected: asyncio.Event | None = None,
    ) -> None:
        self._source = source
        self._queue: asyncio.Queue = asyncio.Queue(maxsize=buffer_size)
        self._disconnected = disconnected
        self._producer: asyncio.Task | None = None
        self._closed = False

    async def _produce(self) -> None:
        try:
            async for token in self._source:
                await self._queue.put(token.encode("utf-8"))
        except asyncio.CancelledError:
            raise
        except Exception as e:
            await self._queue.put(_Failure(e))
            return
        await self._queue.put(_DONE)

    async def _next_item(self) -> object:
        if self._disconnected is None:
            return await self._queue.get()
        if self._disconnected.is_set():
            return _GONE
        getter = asyncio.ensure_future(self._queue.get())
        gone = asyncio.ensure_future(self._disconnected.wait())
        try:
            await asyncio.wait({getter, gone}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            gone.cancel()
            if not getter.done():
                getter.cancel()
        if getter.done() and not getter.cancelled():
            return getter.result()
        return _GONE

    def __aiter__(self) -> "TokenRelay":
        return self

    async def __anext__(self) -> bytes:
        if self._closed:
            raise StopAsyncIteration
        if self._producer is None:
            self._producer = asyncio.create_task(self._produce())
        item = await self._next_item()
        if item is _DONE:
            await self.close()
            raise StopAsyncIteration
        if item is _GONE:
            logger.info("Client disconnected, closing upstream stream")
            await self.close()
            raise StopAsyncIteration
        if isinstance(item, _Failure):
            logger.error("Streaming error", exc_info=item.error)
            await self.close()
            raise StreamingError(str(item.error)) from item.error
        return item

    async def close(self) -> None:
        """Stop pulling from the upstream and release it. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        if self._producer is not None and not self._producer.done():
            self._producer.cancel()
            try:
                await self._producer
            except asyncio.CancelledError:
                pass
        await self._source.aclose()
