"""Resource families and how their request targets are built."""

from typing import Any, Callable, Dict, List, Tuple

from ..core.http_client import build_target
from ..core.search import Search
from ..models.types import Anime, Character, Envelope, Manga, Producer, User

Configure = Callable[[Search], Search]

# family -> (path segment, resource schema)
RESOURCES: Dict[str, Tuple[str, Any]] = {
    "anime": ("/anime", Anime),
    "manga": ("/manga", Manga),
    "user": ("/users", User),
    "character": ("/characters", Character),
    "producer": ("/producers", Producer),
}


def item_target(family: str, id: int) -> Tuple[str, Any]:
    """URL and envelope shape for `GET /<family>/<id>`."""
    path, schema = RESOURCES[family]
    if isinstance(id, bool) or not isinstance(id, int) or id < 0:
        raise ValueError(f"{family} id must be a non-negative integer, got {id!r}")
    return build_target(f"{path}/{id}"), Envelope[schema]


def collection_target(family: str, configure: Configure) -> Tuple[str, Any]:
    """URL and envelope shape for `GET /<family>?<filters>`.

    `configure` is applied once to a fresh Search before anything else happens.
    """
    path, schema = RESOURCES[family]
    search = configure(Search())
    if not isinstance(search, Search):
        raise TypeError(f"configure must return a Search, got {type(search).__name__}")
    return build_target(path, search), Envelope[List[schema]]
