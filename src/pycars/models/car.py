"""Car model."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Car(BaseModel):
    """A car record as exposed by the remote service.

    Only ``id`` is known to the client.  Every other field (make, model,
    year, ...) is accepted as-is and sent back unchanged, so the model
    round-trips whatever the server and the user put into it.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        populate_by_name=True,
    )

    id: str | None = Field(default=None, validation_alias=AliasChoices("id", "_id"))
    """Server-assigned identifier; ``None`` until the car is persisted."""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @property
    def is_persisted(self) -> bool:
        """Whether the server has assigned this car an id."""
        return self.id is not None

    @property
    def fields(self) -> dict[str, Any]:
        """The caller-defined fields, without ``id``."""
        return dict(self.model_extra or {})

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for a create/update request."""
        payload = self.fields
        if self.id is not None:
            payload["id"] = self.id
        return payload

    def with_fields(self, **fields: Any) -> Car:
        """Return a copy with *fields* set; the id is never changed here."""
        if "id" in fields or "_id" in fields:
            raise ValueError("id is server-assigned and cannot be edited")
        merged = self.to_payload()
        merged.update(fields)
        return Car.model_validate(merged)
