"""Payload models held by the process-wide singleton."""

from pydantic import BaseModel, Field


class SingletonValue(BaseModel):
    """The value held by the process-wide singleton.

    Mutable, but the holder never replaces the instance once published.
    Constructing it from a non-string raises ``pydantic.ValidationError``.
    """

    value: str = Field(..., description="Init value of the caller that won construction")

    @classmethod
    def from_init_value(cls, init_value: str) -> "SingletonValue":
        """Factory used by the holder."""
        return cls(value=init_value)
