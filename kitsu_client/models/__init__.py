"""Models and type definitions for kitsu-client."""

from .types import (
    Anime, Manga, User, Character, Producer, Envelope,
    AnimeAttributes, MangaAttributes, UserAttributes, CharacterAttributes, ProducerAttributes,
    Image, Links, Titles,
)

__all__ = [
    "Anime", "Manga", "User", "Character", "Producer", "Envelope",
    "AnimeAttributes", "MangaAttributes", "UserAttributes", "CharacterAttributes", "ProducerAttributes",
    "Image", "Links", "Titles",
]
