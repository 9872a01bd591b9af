from url_join import constants


def test_default_constants():
    """Guard defaults from accidental drift."""
    assert constants.DEFAULT_NORMALIZE is True
    assert constants.DEFAULT_TRAILING_SLASH is None
    assert constants.PATH_SEPARATOR == "/"
    assert constants.QUERY_MARK == "?"
    assert constants.QUERY_SAFE_CHARS == "!*'()"


def test_protocol_pattern():
    assert constants.PROTOCOL_PATTERN.match("https://x").group(0) == "https://"
    assert constants.PROTOCOL_PATTERN.match("a.b-c+d://x").group(0) == "a.b-c+d://"
    assert constants.PROTOCOL_PATTERN.match("://x") is None
    assert constants.PROTOCOL_PATTERN.match("http:/x") is None
