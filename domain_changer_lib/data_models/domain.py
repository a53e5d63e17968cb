"""
The :class:`Domain` model - a validated pair of an *old* URL and the *new*
URL that replaces it.

Identity of a pair is the normalized host of its ``old`` URL: two pairs
describing ``https://Twitter.com/`` and ``http://www.twitter.com`` are the
same domain, whatever they map to.
"""

from pydantic import ConfigDict, field_validator

from domain_changer_lib.utils.tokenizer import parse_candidate
from domain_changer_lib.data_models.base_model import JsonSerializableModel
from domain_changer_lib.exceptions import InvalidNewDomainError, InvalidOldDomainError
from domain_changer_lib.utils.validators import (
    is_absolute_url,
    normalize_host,
    url_host,
)


class Domain(JsonSerializableModel):
    """
    An (old, new) URL mapping used for substitution.

    Attributes
    ----------
    old : str
        Absolute http(s) URL whose host should be replaced, kept verbatim.
    new : str
        Absolute http(s) URL used as the replacement prefix, kept verbatim.

    Examples
    --------
    >>> domain = Domain.try_from("https://youtube.com", "https://piped.kavin.rocks")
    >>> domain.old_host, domain.new_host
    ('youtube.com', 'piped.kavin.rocks')
    >>> domain.matches_host("WWW.YouTube.com")
    True
    """

    model_config = ConfigDict(frozen=True)

    old: str
    new: str

    @classmethod
    def try_from(cls, old: str, new: str) -> "Domain":
        """
        Create a :class:`Domain` from two URL strings.

        Raises
        ------
        InvalidOldDomainError
            ``old`` lacks a scheme or a host, or is not a URL at all.
        InvalidNewDomainError
            Same for ``new``.
        """
        return cls(old=old, new=new)

    @field_validator("old")
    @classmethod
    def validate_old(cls, value: str) -> str:
        if not is_absolute_url(value):
            raise InvalidOldDomainError(f"'{value}', is invalid old domain")
        return value

    @field_validator("new")
    @classmethod
    def validate_new(cls, value: str) -> str:
        if not is_absolute_url(value):
            raise InvalidNewDomainError(f"'{value}', is invalid new domain")
        return value

    @property
    def old_host(self) -> str:
        """Host of ``old`` in lower case, without a leading ``www.``."""
        return normalize_host(url_host(self.old))

    @property
    def new_host(self) -> str:
        return url_host(self.new)

    @property
    def replacement_prefix(self) -> str:
        """``new`` without trailing slashes."""
        return self.new.rstrip("/")

    def matches_host(self, host: str) -> bool:
        """
        Check whether *host* is the old host of this pair.

        The comparison is case‑insensitive and a leading ``www.`` on *host*
        is ignored.
        """
        return normalize_host(host) == self.old_host

    def matches_new_host(self, host: str) -> bool:
        return normalize_host(host) == normalize_host(self.new_host)

    def contains(self, word: str, just_old: bool = True) -> bool:
        """
        Check whether a single *word* is a URL reference to this domain.

        Parameters
        ----------
        word: str
            A URL or a bare domain, e.g. ``"youtube.com/watch?v=1"``.
        just_old: bool, default ``True``
            When ``False`` a reference to the *new* host counts as well.
        """
        candidate = parse_candidate(word)
        if candidate is None:
            return False
        if self.matches_host(candidate.host):
            return True
        return not just_old and self.matches_new_host(candidate.host)

    def rewrite(self, suffix: str = "") -> str:
        """
        Build the replacement URL for a matched token.

        Exactly one slash separates :attr:`replacement_prefix` from a suffix
        that does not start with one (an empty suffix gives a trailing slash).

        >>> Domain.try_from("https://t.co/", "https://nitter.net/").rewrite("?s=20")
        'https://nitter.net/?s=20'
        """
        if not suffix.startswith("/"):
            suffix = "/" + suffix
        return self.replacement_prefix + suffix

    def __eq__(self, other) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return self.matches_host(other.old_host)

    def __hash__(self) -> int:
        return hash(self.old_host)
