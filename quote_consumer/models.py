"""Quote value types decoded from the upstream quote service."""

from pydantic import BaseModel, ConfigDict, Field


class QuoteValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    quote: str

    def __str__(self) -> str:
        return f"Value{{id={self.id}, quote='{self.quote}'}}"


class Quote(BaseModel):
    """A random quote as returned by `GET /api/random`.

    Unknown fields in the upstream payload are ignored; instances are
    immutable once validated.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    value: QuoteValue

    def __str__(self) -> str:
        return f"Quote{{type='{self.type}', value={self.value}}}"
