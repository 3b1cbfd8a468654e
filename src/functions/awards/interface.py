import re
from pydantic import BaseModel, Field, field_validator
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(value) -> Optional[int]:
    """Reads the integer prefix of a parameter: "12abc" -> 12, "1.5" -> 1, "abc" -> None."""
    if value is None or isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


class AwardLookupRequest(BaseModel):
    movie_id: int = Field(
        ..., alias="movieId", description="Movie identifier taken from the path."
    )
    award_body: str = Field(
        ...,
        alias="awardBody",
        min_length=1,
        description="Awarding body taken from the path (e.g. 'Academy').",
    )

    @field_validator("movie_id", mode="before")
    @classmethod
    def parse_movie_id(cls, v):
        movie_id = parse_leading_int(v)
        if not movie_id:
            raise ValueError("movieId must be a non-zero integer")
        return movie_id


class AwardThresholdRequest(AwardLookupRequest):
    min_awards: Optional[int] = Field(
        None,
        alias="min",
        description="Only return the record when numAwards is strictly greater.",
    )

    @field_validator("min_awards", mode="before")
    @classmethod
    def parse_min_awards(cls, v):
        return parse_leading_int(v)
