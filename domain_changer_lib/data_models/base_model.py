"""
Base model definitions for the domain‑changer library.

``JsonSerializableModel`` gives every data model the same two‑way JSON
capability (:meth:`to_json` / :meth:`from_json`) and keeps pydantic's own
validation errors behind the library exception hierarchy.  Domain specific
validators raise :class:`~domain_changer_lib.exceptions.ValidationError`
subclasses directly; those are not ``ValueError`` instances, so pydantic lets
them propagate untouched.
"""

from typing import Any

from pydantic import BaseModel, ValidationError as PydanticValidationError

from domain_changer_lib.exceptions import MalformedRecordError


def describe_pydantic_error(exc: PydanticValidationError) -> str:
    """
    Render pydantic errors as a single line, e.g.
    ``domains.0.new: Field required``.
    """
    parts = []
    for error in exc.errors():
        location = ".".join(str(_l) for _l in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


class JsonSerializableModel(BaseModel):
    """
    Pydantic model that converts to and from a JSON record.

    Parsing always re‑validates the record - a JSON document never bypasses
    the checks performed by the regular constructor.
    """

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise MalformedRecordError(
                f"Invalid {type(self).__name__}: {describe_pydantic_error(exc)}"
            ) from exc

    def to_json(self) -> str:
        """Serialize the model to a compact JSON string."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, json_str: str | bytes):
        """
        Build the model from a JSON string.

        Raises
        ------
        MalformedRecordError
            The text is not valid JSON, a field is missing or has a wrong type.
        InvalidOldDomainError, InvalidNewDomainError, DuplicateDomainError
            A record is syntactically fine but breaks a domain rule.
        """
        try:
            return cls.model_validate_json(json_str)
        except PydanticValidationError as exc:
            raise MalformedRecordError(
                f"Invalid {cls.__name__} record: {describe_pydantic_error(exc)}"
            ) from exc
