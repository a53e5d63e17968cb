"""
Tokenizer that finds URL‑like references in free‑form text.

A *candidate* is any maximal substring that syntactically resembles a URL or
a bare domain mention - whether its host is configured somewhere is decided
later by :meth:`Domain.matches_host`.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from domain_changer_lib.utils.validators import HOST_REGEX

# Characters that always end a token
_STOP_CHARS = r"""\s<>"'"""

# Sentence punctuation which is dropped from the end of a token
_TRAILING_PUNCT = r".,;:!?)\]}"


@dataclass(frozen=True)
class UrlCandidate:
    """
    A single URL‑like token found in a text.

    Attributes
    ----------
    start, end : int
        Slice of the source text occupied by the token.
    scheme : str
        ``"http://"``, ``"https://"`` or ``""`` for a bare mention.
    host : str
        Host exactly as written, including a possible ``www.`` prefix.
    suffix : str
        Everything after the host: path, query and fragment (may be empty).
    """

    start: int
    end: int
    scheme: str
    host: str
    suffix: str

    @property
    def token(self) -> str:
        return f"{self.scheme}{self.host}{self.suffix}"


class UrlTokenizer:
    """
    Locates URL candidates with a single compiled regular expression.

    The pattern matches:
      • nothing glued to the left (a word, an e‑mail ``@``, a path or a scheme)
      • an optional scheme (http:// or https://, case‑insensitive)
      • a host built from letters, digits, hyphens and dots
      • an optional path (``/...``) or query / fragment (``?...`` / ``#...``)
        running until whitespace or one of ``< > " '``; a bare ``#`` is an
        empty fragment
      • trailing sentence punctuation ``. , ; : ! ? ) ] }`` stays outside
        of the token
    A host directly followed by anything else (a ``:8080`` port, an opening
    ``(``, ``[`` or ``{``) is not a candidate.
    """

    _CANDIDATE_REGEX = rf"""
        (?<![\w.@/:\\-])                        # not glued to a word / path
        (?P<scheme>(?i:https?://))?             # optional http/https scheme
        (?P<host>{HOST_REGEX})                  # host, www. included
        (?P<suffix>
            /(?:[^{_STOP_CHARS}]*[^{_STOP_CHARS}{_TRAILING_PUNCT}])?
            |
            \?[^{_STOP_CHARS}]*[^{_STOP_CHARS}{_TRAILING_PUNCT}]
            |
            \#(?:[^{_STOP_CHARS}]*[^{_STOP_CHARS}{_TRAILING_PUNCT}])?
        )?                                      # optional path, query or fragment
        (?=[{_TRAILING_PUNCT}]*(?:[{_STOP_CHARS}]|$))
    """

    def __init__(self):
        self._compiled_regex = re.compile(self._CANDIDATE_REGEX, flags=re.VERBOSE)

    def find_candidates(self, text: str) -> Iterator[UrlCandidate]:
        """
        Yield every candidate token of *text*, left to right.
        """
        for match in self._compiled_regex.finditer(text):
            yield self._to_candidate(match)

    def parse_candidate(self, word: str) -> Optional[UrlCandidate]:
        """
        Interpret a single word as a URL candidate.

        Returns ``None`` when the whole (stripped) word is not a URL‑like
        reference, e.g. ``"youtube.com:8080"`` or ``"user@youtube.com"``.
        """
        match = self._compiled_regex.fullmatch(word.strip())
        if match is None:
            return None
        return self._to_candidate(match)

    @staticmethod
    def _to_candidate(match: re.Match) -> UrlCandidate:
        return UrlCandidate(
            start=match.start(),
            end=match.end(),
            scheme=match.group("scheme") or "",
            host=match.group("host"),
            suffix=match.group("suffix") or "",
        )


DEFAULT_TOKENIZER = UrlTokenizer()


def find_candidates(text: str) -> Iterator[UrlCandidate]:
    return DEFAULT_TOKENIZER.find_candidates(text)


def parse_candidate(word: str) -> Optional[UrlCandidate]:
    return DEFAULT_TOKENIZER.parse_candidate(word)
