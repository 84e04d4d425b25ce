from urllib.parse import parse_qsl

from kitsu_client.core.search import Search


def test_empty_search_has_empty_query():
    s = Search()
    assert s.query == ""
    assert not s
    assert len(s) == 0


def test_pairs_are_encoded_in_insertion_order():
    s = Search().filter("text", "a b").filter("name", "x")
    assert s.query == "text=a%20b&name=x"
    assert str(s) == s.query


def test_filter_returns_new_search():
    base = Search().filter("text", "orange")
    extended = base.filter("page[limit]", 5)
    assert base.pairs == (("text", "orange"),)
    assert extended.pairs == (("text", "orange"), ("page[limit]", "5"))


def test_duplicate_keys_are_kept():
    s = Search().filter("genres", "comedy").filter("genres", "slice of life")
    assert s.query == "genres=comedy&genres=slice%20of%20life"


def test_reserved_characters_are_escaped():
    s = Search().filter("filter[text]", "a&b=c?")
    assert s.query == "filter%5Btext%5D=a%26b%3Dc%3F"


def test_query_parses_back_to_original_pairs():
    pairs = [("text", "Non Non Biyori"), ("page[limit]", "10"), ("text", "ünïcode/ç"), ("sort", "-averageRating")]
    s = Search()
    for k, v in pairs:
        s = s.filter(k, v)
    assert parse_qsl(s.query, keep_blank_values=True) == pairs


def test_equality_by_pairs():
    assert Search().filter("a", "1") == Search().filter("a", "1")
    assert Search().filter("a", "1") != Search().filter("a", "2")
