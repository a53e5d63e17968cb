import pytest

from domain_changer_lib import Config, Domain


@pytest.fixture
def default_config() -> Config:
    return Config.default()


@pytest.fixture
def youtube() -> Domain:
    return Domain.try_from("https://youtube.com/", "https://piped.kavin.rocks/")


@pytest.fixture
def twitter() -> Domain:
    return Domain.try_from("https://twitter.com/", "https://nitter.net/")
