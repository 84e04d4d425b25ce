import asyncio

import pytest

from kitsu_client import AsyncKitsuRequester, KitsuRequester


@pytest.mark.integration
def test_get_anime_live():
    with KitsuRequester() as kitsu:
        out = kitsu.get_anime(1)
    assert out["data"]["id"] == 1


@pytest.mark.integration
def test_search_anime_live():
    with KitsuRequester() as kitsu:
        out = kitsu.search_anime(lambda f: f.filter("filter[text]", "non non biyori"))
    assert isinstance(out["data"], list)


@pytest.mark.integration
def test_async_get_character_live():
    async def main():
        async with AsyncKitsuRequester() as kitsu:
            return await kitsu.get_character(1)

    out = asyncio.run(main())
    assert out["data"]["id"] == 1
