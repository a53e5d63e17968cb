from domain_changer_lib.changer.core.changer import (
    DomainChanger,
    parse_string,
    extract_old_domains,
)
from domain_changer_lib.data_models.config import Config, default_domains
from domain_changer_lib.data_models.domain import Domain
from domain_changer_lib.exceptions import (
    DomainChangerError,
    ValidationError,
    InvalidOldDomainError,
    InvalidNewDomainError,
    DuplicateDomainError,
    MalformedRecordError,
)

__all__ = [
    "DomainChanger",
    "parse_string",
    "extract_old_domains",
    "Config",
    "default_domains",
    "Domain",
    "DomainChangerError",
    "ValidationError",
    "InvalidOldDomainError",
    "InvalidNewDomainError",
    "DuplicateDomainError",
    "MalformedRecordError",
]
