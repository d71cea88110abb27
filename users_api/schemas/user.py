"""User Schemas — Pydantic model validating full-record updates.

Invariants:
    - firstName, secondName: required, non-empty strings
    - age: required integer, 0-150 inclusive; booleans rejected, numeric strings coerced
    - city: optional, but non-empty when present
    - Unknown fields rejected (extra="forbid")

Design Decisions:
    - Only PUT is validated; POST stores whatever object the client sends
    - No whitespace stripping: "  " is accepted as a name
    - An explicit null city is treated like an omitted one
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserUpdate(BaseModel):
    """Full replacement of a user's editable fields."""
    model_config = ConfigDict(extra="forbid")

    firstName: str = Field(min_length=1)
    secondName: str = Field(min_length=1)
    age: int = Field(ge=0, le=150)
    city: str | None = Field(None, min_length=1)

    @field_validator("age", mode="before")
    @classmethod
    def reject_bool_age(cls, v):
        # bool is an int subclass; lax mode would store true as 1
        if isinstance(v, bool):
            raise ValueError("age must be a number, not a boolean")
        return v


def format_validation_details(errors: list[dict]) -> list[dict]:
    """Flatten pydantic error dicts into {field, message, type} entries.

    The leading "body" segment FastAPI adds to request errors is dropped so
    route-level and service-level validation report identical field paths.
    """
    details = []
    for e in errors:
        loc = list(e.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        details.append({
            "field": ".".join(str(part) for part in loc),
            "message": e["msg"],
            "type": e["type"],
        })
    return details
