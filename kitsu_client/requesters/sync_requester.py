"""Blocking requester backed by a `requests.Session`."""

from typing import List, Optional

import requests

from ..core.http_client import http_get
from ..models.types import Anime, Character, Envelope, Manga, Producer, User
from .resources import Configure, collection_target, item_target


class KitsuRequester:
    """Blocking client for the Kitsu API.

    Every method performs exactly one GET on the calling thread and returns
    the decoded envelope, or raises a `KitsuError`.

        with KitsuRequester() as kitsu:
            found = kitsu.search_anime(lambda f: f.filter("text", "Your Lie in April"))
            for anime in found["data"]:
                print(anime["attributes"]["canonicalTitle"])

    Pass your own `session` to control timeouts, headers or pooling; a session
    passed in is never closed by the requester.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def get_resource(self, family: str, id: int):
        url, shape = item_target(family, id)
        return http_get(self.session, url, shape)

    def search_resource(self, family: str, configure: Configure):
        url, shape = collection_target(family, configure)
        return http_get(self.session, url, shape)

    def get_anime(self, id: int) -> Envelope[Anime]:
        return self.get_resource("anime", id)

    def get_manga(self, id: int) -> Envelope[Manga]:
        return self.get_resource("manga", id)

    def get_user(self, id: int) -> Envelope[User]:
        return self.get_resource("user", id)

    def get_character(self, id: int) -> Envelope[Character]:
        return self.get_resource("character", id)

    def get_producer(self, id: int) -> Envelope[Producer]:
        return self.get_resource("producer", id)

    def search_anime(self, configure: Configure) -> Envelope[List[Anime]]:
        return self.search_resource("anime", configure)

    def search_manga(self, configure: Configure) -> Envelope[List[Manga]]:
        return self.search_resource("manga", configure)

    def search_users(self, configure: Configure) -> Envelope[List[User]]:
        return self.search_resource("user", configure)

    def search_characters(self, configure: Configure) -> Envelope[List[Character]]:
        return self.search_resource("character", configure)

    def search_producers(self, configure: Configure) -> Envelope[List[Producer]]:
        return self.search_resource("producer", configure)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "KitsuRequester":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
