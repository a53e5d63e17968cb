"""
Custom exception hierarchy for the domain‑changer library.

All public exceptions inherit from :class:`DomainChangerError`, allowing
callers to catch a single base class for any library failure while still
being able to differentiate specific error conditions when needed.

Errors are raised only while building :class:`Domain` or :class:`Config`
objects (directly or from JSON).  Matching and rewriting never raise; a text
without any known domain is a normal outcome.
"""


class DomainChangerError(Exception):
    """Base exception for all domain‑changer errors."""

    pass


class ValidationError(DomainChangerError):
    """Raised when a domain pair or a configuration cannot be constructed."""

    pass


class InvalidOldDomainError(ValidationError):
    """Raised when the ``old`` side of a pair is not an absolute http(s) URL."""

    pass


class InvalidNewDomainError(ValidationError):
    """Raised when the ``new`` side of a pair is not an absolute http(s) URL."""

    pass


class DuplicateDomainError(ValidationError):
    """Raised when a configuration would hold two pairs with the same old host."""

    pass


class MalformedRecordError(ValidationError):
    """Raised when a JSON record is not valid JSON or misses a required field."""

    pass
