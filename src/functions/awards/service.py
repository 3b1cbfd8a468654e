from typing import Any, Dict, List, Optional

from common.dynamo_client import get_awards_table
from common.errors import NotFoundError

MISSING_PARAMS_MESSAGE = "Missing awardBody or movieId"
NOT_FOUND_MESSAGE = "No awards found for the specified movie and award body."
THRESHOLD_NOT_MET_MESSAGE = "Request failed"


def find_awards(movie_id: int, award_body: str) -> List[Dict[str, Any]]:
    """
    Runs the single composite key query. Raises NotFoundError when the
    movie has no record for the awarding body.
    """
    items = get_awards_table().query_awards(movie_id, award_body)
    if not items:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    return items


def meets_threshold(record: Dict[str, Any], min_awards: Optional[int]) -> bool:
    """A record passes when no threshold is given or numAwards exceeds it."""
    if min_awards is None:
        return True
    num_awards = record.get("numAwards")
    if num_awards is None:
        return False
    return num_awards > min_awards
