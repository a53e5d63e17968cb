import logging

import pytest

from domain_changer_lib import (
    Config,
    Domain,
    DomainChanger,
    extract_old_domains,
    parse_string,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "visit https://www.youtube.com/channel/UC1",
            "visit https://piped.kavin.rocks/channel/UC1",
        ),
        ("twitter.com/Awiteb", "https://nitter.net/Awiteb"),
        ("hi, youtube.com/something", "hi, https://piped.kavin.rocks/something"),
        ("hi, youtube.com", "hi, https://piped.kavin.rocks/"),
        ("http://reddit.com/r/python", "https://libredd.it/r/python"),
        ("HTTPS://WWW.YOUTUBE.COM/Watch", "https://piped.kavin.rocks/Watch"),
        ("see youtu.be/abc.", "see https://piped.kavin.rocks/abc."),
        ("(twitter.com/x)", "(https://nitter.net/x)"),
        ("t.co?s=20", "https://nitter.net/?s=20"),
        ("is it youtube.com?", "is it https://piped.kavin.rocks/?"),
        ("youtube.com#", "https://piped.kavin.rocks/#"),
        ("https://youtube.com#", "https://piped.kavin.rocks/#"),
        (
            "youtube.com/watch?v=1&t=2#c youtube.com/watch?v=3",
            "https://piped.kavin.rocks/watch?v=1&t=2#c "
            "https://piped.kavin.rocks/watch?v=3",
        ),
    ],
)
def test_parse_string(default_config, text, expected):
    assert parse_string(default_config, text) == expected


def test_parse_string_long_text(default_config):
    text = (
        "Wellcome to my youtube channel: "
        "https://www.youtube.com/channel/UCeRbJsc8cl7xBwT3jIxaAdg "
        "And my twitter is: twitter.com/Awiteb"
    )
    assert parse_string(default_config, text) == (
        "Wellcome to my youtube channel: "
        "https://piped.kavin.rocks/channel/UCeRbJsc8cl7xBwT3jIxaAdg "
        "And my twitter is: https://nitter.net/Awiteb"
    )


def test_parse_string_keeps_whitespace(default_config):
    text = "a\n\tyoutube.com  b\r\n"
    expected = "a\n\thttps://piped.kavin.rocks/  b\r\n"
    assert parse_string(default_config, text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no links here",
        "Hello, world",
        "Hello https://randomdooomain.com",
        "notyoutube.com",
        "m.youtube.com/watch",
        "me@youtube.com",
        "youtube.com:8080/watch",
        "youtube.com(foo)",
        "twitter.com[1]",
        "https://example.com/youtube.com",
        "ftp://youtube.com/",
        "https:// youtube",
    ],
)
def test_unmatched_text_passes_through(default_config, text):
    assert parse_string(default_config, text) == text
    assert extract_old_domains(default_config, text) == []


def test_new_url_with_path_is_a_prefix():
    config = Config.from_pairs([("https://youtube.com", "https://proxy.example/yt/")])
    assert parse_string(config, "youtube.com/watch?v=1") == (
        "https://proxy.example/yt/watch?v=1"
    )


def test_empty_config_changes_nothing():
    config = Config(domains=[])
    assert parse_string(config, "twitter.com/Awiteb") == "twitter.com/Awiteb"


def test_extract_old_domains(default_config, youtube, twitter):
    domains = extract_old_domains(
        default_config, "Hi i hate youtube.com and https://twitter.com what about you?"
    )
    assert domains == [youtube, twitter]
    assert [d.new for d in domains] == [
        "https://piped.kavin.rocks/",
        "https://nitter.net/",
    ]
    assert domains[0] is default_config.domains[0]


def test_extract_old_domains_is_not_deduplicated(default_config):
    domains = extract_old_domains(
        default_config, "youtu.be/a youtube.com youtu.be/b WWW.YOUTU.BE"
    )
    assert [d.old_host for d in domains] == [
        "youtu.be",
        "youtube.com",
        "youtu.be",
        "youtu.be",
    ]


def test_rewriting_twice_with_disjoint_domains_is_stable(default_config):
    text = "watch youtube.com/watch?v=1, read reddit.com/r/python and t.co/abc"
    once = parse_string(default_config, text)
    assert parse_string(default_config, once) == once


def test_rewriting_is_not_idempotent_for_chained_domains():
    config = Config.from_pairs(
        [
            ("https://a.example/", "https://b.example/"),
            ("https://b.example/", "https://c.example/"),
        ]
    )
    once = parse_string(config, "go to a.example/x")
    assert once == "go to https://b.example/x"
    assert parse_string(config, once) == "go to https://c.example/x"


def test_first_configured_domain_wins():
    first = Domain.try_from("https://twitter.com/", "https://nitter.net/")
    second = Domain.try_from("https://www.twitter.com/", "https://x.example/")
    config = Config.model_construct(domains=[first, second])

    assert parse_string(config, "twitter.com/a") == "https://nitter.net/a"
    assert extract_old_domains(config, "twitter.com") == [first]
    assert extract_old_domains(config, "twitter.com")[0] is first


def test_domain_changer_defaults_to_default_config():
    changer = DomainChanger()
    assert changer.config.old_hosts() == Config.default().old_hosts()
    assert changer.parse_string("twitter.com/Awiteb") == "https://nitter.net/Awiteb"


def test_parse_payload(default_config):
    changer = DomainChanger(default_config)
    payload = {
        "text": "see youtube.com/watch?v=1",
        "links": ["t.co/x", 5, None, {"nested": "reddit.com"}],
        "youtu.be": 1.5,
    }
    assert changer.parse_payload(payload) == {
        "text": "see https://piped.kavin.rocks/watch?v=1",
        "links": ["https://nitter.net/x", 5, None, {"nested": "https://libredd.it/"}],
        "https://piped.kavin.rocks/": 1.5,
    }
    assert changer.parse_payload(42) == 42


def test_replacements_are_logged(default_config, caplog):
    changer = DomainChanger(default_config)
    with caplog.at_level(logging.DEBUG):
        changer.parse_string("twitter.com/Awiteb")
    assert "twitter.com/Awiteb -> https://nitter.net/Awiteb" in caplog.text


def test_custom_logger_is_used(default_config, caplog):
    logger = logging.getLogger("tests.domain_changer")
    changer = DomainChanger(default_config, logger=logger)
    with caplog.at_level(logging.DEBUG, logger="tests.domain_changer"):
        changer.parse_string("t.co")
    assert [r.name for r in caplog.records] == ["tests.domain_changer"]
