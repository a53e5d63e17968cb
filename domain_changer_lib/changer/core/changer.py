"""
DomainChanger module
====================

Provides the :class:`DomainChanger` class - the matcher / rewriter engine that
applies a :class:`~domain_changer_lib.data_models.config.Config` to arbitrary
text.  The public API supports:

* Rewriting of plain text via :meth:`DomainChanger.parse_string`.
* Read‑only detection of configured domains via
  :meth:`DomainChanger.extract_old_domains`.
* Recursive rewriting of complex data structures (``dict``, ``list`` and
  nested combinations) via :meth:`DomainChanger.parse_payload`.

The module level :func:`parse_string` and :func:`extract_old_domains` are thin
shortcuts for a one‑off engine built around a given config.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from domain_changer_lib.utils.tokenizer import (
    DEFAULT_TOKENIZER,
    UrlCandidate,
    UrlTokenizer,
)
from domain_changer_lib.data_models.config import Config
from domain_changer_lib.data_models.domain import Domain


class DomainChanger:
    """
    Replaces configured old domains with their new counterparts.

    Both operations scan the text once, left to right.  For every URL
    candidate found by the tokenizer the first domain of the config whose
    :meth:`Domain.matches_host` accepts the candidate host is used; text that
    does not match anything passes through byte for byte.

    Attributes
    ----------
    config : Config
        Domain pairs in lookup order.  When not supplied at construction time,
        :meth:`Config.default` is used.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        tokenizer: Optional[UrlTokenizer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config if config is not None else Config.default()
        self.tokenizer = tokenizer or DEFAULT_TOKENIZER
        self.logger = logger or logging.getLogger(__name__)

    def parse_string(self, text: str) -> str:
        """
        Return *text* with every configured old domain replaced.

        The matched token (scheme, host and suffix) is replaced with
        :meth:`Domain.rewrite` of its suffix, so path, query and fragment
        survive unchanged.

        Parameters
        ----------
        text: str
            The original text.

        Returns
        -------
        str
            The rewritten text, or *text* itself when nothing matched.
        """
        chunks = []
        position = 0
        for candidate, domain in self._matches(text):
            replacement = domain.rewrite(candidate.suffix)
            self.logger.debug(
                "Changing %s -> %s",
                text[candidate.start : candidate.end],
                replacement,
            )
            chunks.append(text[position : candidate.start])
            chunks.append(replacement)
            position = candidate.end

        if not chunks:
            return text
        chunks.append(text[position:])
        return "".join(chunks)

    def extract_old_domains(self, text: str) -> List[Domain]:
        """
        Return the configured domains referenced in *text*.

        One entry is produced per occurrence, in order of appearance - a
        domain mentioned twice is returned twice.
        """
        return [domain for _, domain in self._matches(text)]

    def parse_payload(self, payload: Dict | str | List | Any):
        """
        Recursively rewrite a payload of arbitrary type.

        * ``str`` - processed by :meth:`parse_string`.
        * ``dict`` - each key and value is processed recursively.
        * ``list`` - each element is processed recursively.
        * any other type - returned unchanged.
        """
        if type(payload) is str:
            return self.parse_string(text=payload)
        elif type(payload) is dict:
            return self._parse_dict(dict_payload=payload)
        elif type(payload) is list:
            return self._parse_list(list_payload=payload)
        return payload

    def _matches(self, text: str) -> Iterator[Tuple[UrlCandidate, Domain]]:
        for candidate in self.tokenizer.find_candidates(text):
            domain = self.config.get_by_old(candidate.host)
            if domain is not None:
                yield candidate, domain

    def _parse_list(self, list_payload: List[Any]) -> List:
        _p = []
        for _e in list_payload:
            _p.append(self.parse_payload(payload=_e))
        return _p

    def _parse_dict(self, dict_payload: Dict[Any, Any]) -> Dict[Any, Any]:
        _p = {}
        for k, v in dict_payload.items():
            _k = self.parse_payload(payload=k)
            _p[_k] = self.parse_payload(payload=v)
        return _p


def parse_string(config: Config, text: str) -> str:
    """
    Rewrite *text* with *config*.

    >>> parse_string(Config.default(), "my twitter is: twitter.com/Awiteb")
    'my twitter is: https://nitter.net/Awiteb'
    """
    return DomainChanger(config).parse_string(text)


def extract_old_domains(config: Config, text: str) -> List[Domain]:
    """
    Return every domain of *config* referenced in *text* (not deduplicated).

    >>> [d.old for d in extract_old_domains(Config.default(), "youtube.com and t.co")]
    ['https://youtube.com/', 'https://t.co/']
    """
    return DomainChanger(config).extract_old_domains(text)
