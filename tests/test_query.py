from collections import OrderedDict

from url_join import UNDEFINED
from url_join.query import (
    build_query,
    encode_component,
    extract_query,
    merge_query,
    stringify_query,
)


def test_encode_component_matches_uri_component_rules():
    assert encode_component("hello world") == "hello%20world"
    assert encode_component("a+b") == "a%2Bb"
    assert encode_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_component("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"
    assert encode_component("café") == "caf%C3%A9"


def test_stringify_query_keeps_insertion_order():
    query = OrderedDict([("z", 1), ("a", 2), ("m", 3)])
    assert stringify_query(query) == "?z=1&a=2&m=3"


def test_stringify_query_sequences():
    assert stringify_query({"ids": [1, 2, 3]}) == "?ids=1&ids=2&ids=3"
    assert stringify_query({"ids": (1, None, 3)}) == "?ids=1&ids=3"
    assert stringify_query({"ids": []}) == ""


def test_stringify_query_drops_absent():
    assert stringify_query({"a": None, "b": UNDEFINED}) == ""
    assert stringify_query({}) == ""


def test_stringify_query_booleans_and_numbers():
    assert stringify_query({"on": True, "off": False, "n": 0, "f": 1.5}) == "?on=true&off=false&n=0&f=1.5"


def test_extract_query():
    assert extract_query("users?page=1") == ("users", "?page=1")
    assert extract_query("users?a=1?b=2") == ("users", "?a=1?b=2")
    assert extract_query("users") == ("users", "")
    assert extract_query("?x") == ("", "?x")


def test_merge_query_order_is_existing_then_new():
    assert merge_query("?a=1", "?b=2") == "?a=1&b=2"
    assert merge_query("?b=2", "?a=1") == "?b=2&a=1"
    assert merge_query("", "?b=2") == "?b=2"
    assert merge_query("?a=1", "") == "?a=1"
    assert merge_query("", "") == ""


def test_build_query():
    assert build_query("?a=1", None) == "?a=1"
    assert build_query("", {"b": "x y"}) == "?b=x%20y"
    assert build_query("?a=1", {"b": [None]}) == "?a=1"


def test_stringify_query_small_floats_use_decimal_text():
    assert stringify_query({"eps": 1e-5, "tiny": 1e-7}) == "?eps=0.00001&tiny=1e-7"
