"""Type definitions for Kitsu API payloads.

Shapes follow the JSON:API documents served by the Kitsu edge API. Keys keep
the API's camelCase spelling so a payload can be validated as-is.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from typing_extensions import NotRequired, TypedDict

T = TypeVar("T")


class Links(TypedDict, total=False):
    self: str
    related: str
    first: str
    prev: str
    next: str
    last: str


class Image(TypedDict, total=False):
    tiny: Optional[str]
    small: Optional[str]
    medium: Optional[str]
    large: Optional[str]
    original: Optional[str]


class Titles(TypedDict, total=False):
    en: Optional[str]
    en_jp: Optional[str]
    ja_jp: Optional[str]


class AnimeAttributes(TypedDict):
    canonicalTitle: str
    slug: NotRequired[Optional[str]]
    synopsis: NotRequired[Optional[str]]
    titles: NotRequired[Titles]
    abbreviatedTitles: NotRequired[Optional[List[str]]]
    averageRating: NotRequired[Optional[str]]
    ratingRank: NotRequired[Optional[int]]
    popularityRank: NotRequired[Optional[int]]
    userCount: NotRequired[Optional[int]]
    favoritesCount: NotRequired[Optional[int]]
    startDate: NotRequired[Optional[str]]
    endDate: NotRequired[Optional[str]]
    ageRating: NotRequired[Optional[str]]      # G/PG/R/R18
    ageRatingGuide: NotRequired[Optional[str]]
    subtype: NotRequired[Optional[str]]        # TV/movie/OVA/ONA/special/music
    status: NotRequired[Optional[str]]
    posterImage: NotRequired[Optional[Image]]
    coverImage: NotRequired[Optional[Image]]
    episodeCount: NotRequired[Optional[int]]
    episodeLength: NotRequired[Optional[int]]
    youtubeVideoId: NotRequired[Optional[str]]
    nsfw: NotRequired[Optional[bool]]


class MangaAttributes(TypedDict):
    canonicalTitle: str
    slug: NotRequired[Optional[str]]
    synopsis: NotRequired[Optional[str]]
    titles: NotRequired[Titles]
    abbreviatedTitles: NotRequired[Optional[List[str]]]
    averageRating: NotRequired[Optional[str]]
    ratingRank: NotRequired[Optional[int]]
    popularityRank: NotRequired[Optional[int]]
    userCount: NotRequired[Optional[int]]
    favoritesCount: NotRequired[Optional[int]]
    startDate: NotRequired[Optional[str]]
    endDate: NotRequired[Optional[str]]
    ageRating: NotRequired[Optional[str]]
    subtype: NotRequired[Optional[str]]        # manga/novel/manhua/oneshot/doujin...
    status: NotRequired[Optional[str]]
    posterImage: NotRequired[Optional[Image]]
    coverImage: NotRequired[Optional[Image]]
    chapterCount: NotRequired[Optional[int]]
    volumeCount: NotRequired[Optional[int]]
    serialization: NotRequired[Optional[str]]


class UserAttributes(TypedDict):
    name: str
    slug: NotRequired[Optional[str]]
    about: NotRequired[Optional[str]]
    location: NotRequired[Optional[str]]
    gender: NotRequired[Optional[str]]
    birthday: NotRequired[Optional[str]]
    createdAt: NotRequired[Optional[str]]
    followersCount: NotRequired[Optional[int]]
    followingCount: NotRequired[Optional[int]]
    lifeSpentOnAnime: NotRequired[Optional[int]]
    avatar: NotRequired[Optional[Image]]
    coverImage: NotRequired[Optional[Image]]
    proExpiresAt: NotRequired[Optional[str]]
    waifuOrHusbando: NotRequired[Optional[str]]


class CharacterAttributes(TypedDict):
    name: str
    slug: NotRequired[Optional[str]]
    canonicalName: NotRequired[Optional[str]]
    names: NotRequired[Optional[Dict[str, str]]]
    otherNames: NotRequired[Optional[List[str]]]
    malId: NotRequired[Optional[int]]
    description: NotRequired[Optional[str]]
    image: NotRequired[Optional[Image]]


class ProducerAttributes(TypedDict):
    name: str
    slug: NotRequired[Optional[str]]
    createdAt: NotRequired[Optional[str]]
    updatedAt: NotRequired[Optional[str]]


class Anime(TypedDict):
    id: int
    type: str
    attributes: AnimeAttributes
    links: NotRequired[Links]
    relationships: NotRequired[Dict[str, Any]]


class Manga(TypedDict):
    id: int
    type: str
    attributes: MangaAttributes
    links: NotRequired[Links]
    relationships: NotRequired[Dict[str, Any]]


class User(TypedDict):
    id: int
    type: str
    attributes: UserAttributes
    links: NotRequired[Links]
    relationships: NotRequired[Dict[str, Any]]


class Character(TypedDict):
    id: int
    type: str
    attributes: CharacterAttributes
    links: NotRequired[Links]
    relationships: NotRequired[Dict[str, Any]]


class Producer(TypedDict):
    id: int
    type: str
    attributes: ProducerAttributes
    links: NotRequired[Links]
    relationships: NotRequired[Dict[str, Any]]


class Envelope(TypedDict, Generic[T]):
    """Top-level document: one resource or a list of them under `data`."""
    data: T
    links: NotRequired[Links]
    meta: NotRequired[Dict[str, Any]]
    included: NotRequired[List[Dict[str, Any]]]
