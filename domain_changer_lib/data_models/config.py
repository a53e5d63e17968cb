"""
The :class:`Config` model - the ordered collection of :class:`Domain` pairs
governing a matching / rewriting session.

Pairs are unique by :class:`Domain` equality (the normalized old host).
A duplicate is rejected with :class:`DuplicateDomainError`, both at
construction time and when a pair is added later.
"""

from typing import Iterable, List, Optional, Tuple

from pydantic import ConfigDict, model_validator

from domain_changer_lib.base.constants import DEFAULT_DOMAIN_PAIRS
from domain_changer_lib.data_models.base_model import JsonSerializableModel
from domain_changer_lib.data_models.domain import Domain
from domain_changer_lib.exceptions import DuplicateDomainError


def default_domains() -> List[Domain]:
    """
    Return a fresh list with the built‑in domain pairs - the most popular
    privacy front ends: `piped <https://piped.kavin.rocks/>`_,
    `nitter <https://nitter.net/>`_ and `libredd <https://libredd.it/>`_.
    """
    return [Domain.try_from(old, new) for old, new in DEFAULT_DOMAIN_PAIRS]


def _ensure_unique(domains: List[Domain]) -> None:
    seen = []
    for domain in domains:
        if domain in seen:
            raise DuplicateDomainError(
                f"'{domain.old}' duplicates the old host '{domain.old_host}'"
            )
        seen.append(domain)


class Config(JsonSerializableModel):
    """
    Ordered collection of unique :class:`Domain` pairs.

    Attributes
    ----------
    domains : List[Domain]
        The pairs in lookup order - when a host could match more than one
        pair, the first one wins.  Assigning a new list is validated; add
        pairs to an existing config with :meth:`add_domain` or :meth:`extend`,
        mutating the list in place skips the duplicate check.

    Examples
    --------
    >>> config = Config.from_pairs(
    ...     [
    ...         ("https://youtube.com/", "https://piped.kavin.rocks/"),
    ...         ("https://twitter.com/", "https://nitter.net/"),
    ...     ]
    ... )
    >>> config.old_hosts()
    ['youtube.com', 'twitter.com']
    """

    model_config = ConfigDict(validate_assignment=True)

    domains: List[Domain]

    @model_validator(mode="after")
    def check_unique_domains(self) -> "Config":
        _ensure_unique(self.domains)
        return self

    @classmethod
    def default(cls) -> "Config":
        """Config built from :func:`default_domains`."""
        return cls(domains=default_domains())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "Config":
        """Build a config from ``(old, new)`` URL string pairs."""
        return cls(domains=[Domain.try_from(old, new) for old, new in pairs])

    def add_domain(self, domain: Domain) -> None:
        """
        Append *domain* to the config.

        Raises
        ------
        DuplicateDomainError
            The config already holds a pair with the same old host.
        """
        self.extend([domain])

    def extend(self, domains: Iterable[Domain]) -> None:
        """
        Append several domains; nothing is added when any of them is a
        duplicate.
        """
        domains = list(domains)
        _ensure_unique(self.domains + domains)
        self.domains.extend(domains)

    def old_hosts(self) -> List[str]:
        return [domain.old_host for domain in self.domains]

    def new_hosts(self) -> List[str]:
        return [domain.new_host for domain in self.domains]

    def get_by_old(self, old_host: str) -> Optional[Domain]:
        """
        Return the first domain whose old host matches *old_host*.

        >>> Config.default().get_by_old("WWW.youtube.com").new
        'https://piped.kavin.rocks/'
        >>> Config.default().get_by_old("youtube") is None
        True
        """
        for domain in self.domains:
            if domain.matches_host(old_host):
                return domain
        return None

    def find(self, word: str, just_old: bool = True) -> Optional[Domain]:
        """
        Run :meth:`Domain.contains` against all domains and return the first
        one that contains *word*.
        """
        for domain in self.domains:
            if domain.contains(word, just_old=just_old):
                return domain
        return None
