from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Movie(BaseModel):
    # strict: "1996" ou True não passam como int
    model_config = ConfigDict(strict=True)

    released: int = Field(ge=INT64_MIN, le=INT64_MAX)
    title: Optional[str] = None

    @field_validator("title")
    @classmethod
    def empty_title_is_absent(cls, value: Optional[str]) -> Optional[str]:
        # Título vazio some do JSON, nunca sai como ""
        return value or None


class MovieResult(BaseModel):
    """Envelope: cada item do array sai como {"movie": {...}}."""

    movie: Movie
