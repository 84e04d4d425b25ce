"""Coroutine requester backed by an `httpx.AsyncClient`."""

from typing import List, Optional

import httpx

from ..core.async_http_client import async_http_get, build_async_client
from ..models.types import Anime, Character, Envelope, Manga, Producer, User
from .resources import Configure, collection_target, item_target


class AsyncKitsuRequester:
    """Non-blocking client for the Kitsu API.

    Methods are coroutines with the same outcomes as `KitsuRequester`:
    one GET per call, a decoded envelope or a raised `KitsuError`. The body
    is read chunk by chunk and decoded once complete. Cancellation and
    timeouts belong to the event loop and the client you pass in; the default
    client, like a default `requests.Session`, has no timeout and follows
    redirects.

        async with AsyncKitsuRequester() as kitsu:
            anime = await kitsu.get_anime(1)
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self.client = client if client is not None else build_async_client()

    async def get_resource(self, family: str, id: int):
        url, shape = item_target(family, id)
        return await async_http_get(self.client, url, shape)

    async def search_resource(self, family: str, configure: Configure):
        url, shape = collection_target(family, configure)
        return await async_http_get(self.client, url, shape)

    async def get_anime(self, id: int) -> Envelope[Anime]:
        return await self.get_resource("anime", id)

    async def get_manga(self, id: int) -> Envelope[Manga]:
        return await self.get_resource("manga", id)

    async def get_user(self, id: int) -> Envelope[User]:
        return await self.get_resource("user", id)

    async def get_character(self, id: int) -> Envelope[Character]:
        return await self.get_resource("character", id)

    async def get_producer(self, id: int) -> Envelope[Producer]:
        return await self.get_resource("producer", id)

    async def search_anime(self, configure: Configure) -> Envelope[List[Anime]]:
        return await self.search_resource("anime", configure)

    async def search_manga(self, configure: Configure) -> Envelope[List[Manga]]:
        return await self.search_resource("manga", configure)

    async def search_users(self, configure: Configure) -> Envelope[List[User]]:
        return await self.search_resource("user", configure)

    async def search_characters(self, configure: Configure) -> Envelope[List[Character]]:
        return await self.search_resource("character", configure)

    async def search_producers(self, configure: Configure) -> Envelope[List[Producer]]:
        return await self.search_resource("producer", configure)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "AsyncKitsuRequester":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
