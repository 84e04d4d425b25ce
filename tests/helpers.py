import json

ANIME_1 = {
    "id": "1",
    "type": "anime",
    "links": {"self": "https://kitsu.io/api/edge/anime/1"},
    "attributes": {
        "canonicalTitle": "Cowboy Bebop",
        "titles": {"en": "Cowboy Bebop", "ja_jp": "カウボーイビバップ"},
        "averageRating": "82.3",
        "episodeCount": 26,
        "subtype": "TV",
        "posterImage": None,
    },
}

ANIME_2 = {
    "id": "7442",
    "type": "anime",
    "attributes": {"canonicalTitle": "Attack on Titan", "episodeCount": 25},
}


def body(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


SINGLE_ANIME = body({"data": ANIME_1})
ANIME_LIST = body({"data": [ANIME_1, ANIME_2], "meta": {"count": 2}, "links": {"first": "x"}})


class DummyResponse:
    def __init__(self, status_code=200, content=b"", url="https://kitsu.io/api/edge"):
        self.status_code = status_code
        self.content = content
        self.url = url


class DummySession:
    def __init__(self, response=None, exc=None):
        self.response = response or DummyResponse()
        self.exc = exc
        self.calls = []

    def get(self, url, **kw):
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.response
