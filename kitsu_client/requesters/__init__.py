"""Blocking and non-blocking requesters for the Kitsu API."""

from .async_requester import AsyncKitsuRequester
from .resources import RESOURCES
from .sync_requester import KitsuRequester

__all__ = ["KitsuRequester", "AsyncKitsuRequester", "RESOURCES"]
