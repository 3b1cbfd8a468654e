import pytest
from unittest.mock import patch

from common.dynamo_client import get_awards_table


@pytest.fixture
def mock_table():
    get_awards_table.cache_clear()
    with patch("common.dynamo_client.boto3.resource") as mock_resource:
        yield mock_resource.return_value.Table.return_value
    get_awards_table.cache_clear()


@pytest.fixture
def make_event():
    def _make_event(movie_id="1234", award_body="Academy", query=None):
        path = {}
        if movie_id is not None:
            path["movieId"] = movie_id
        if award_body is not None:
            path["awardBody"] = award_body
        return {
            "rawPath": f"/movies/{movie_id}/awards/{award_body}",
            "pathParameters": path or None,
            "queryStringParameters": query,
        }

    return _make_event
