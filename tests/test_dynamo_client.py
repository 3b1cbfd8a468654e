import pytest
from decimal import Decimal
from unittest.mock import patch

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from common import configs
from common.dynamo_client import AwardsTable, get_awards_table


class TestAwardsTable:
    @pytest.fixture
    def mock_boto3_resource(self):
        with patch("common.dynamo_client.boto3.resource") as mock_resource:
            yield mock_resource

    def test_uses_configured_table_and_region(self, mock_boto3_resource):
        with patch.object(configs, "AWARDS_TABLE_NAME", "MovieAwards"), patch.object(
            configs, "REGION", "eu-west-1"
        ):
            table = AwardsTable()

        mock_boto3_resource.assert_called_once_with(
            "dynamodb", region_name="eu-west-1"
        )
        mock_boto3_resource.return_value.Table.assert_called_once_with("MovieAwards")
        assert table.table_name == "MovieAwards"

    def test_explicit_arguments_override_config(self, mock_boto3_resource):
        table = AwardsTable(table_name="Other", region="us-east-1")

        mock_boto3_resource.assert_called_once_with("dynamodb", region_name="us-east-1")
        assert table.table_name == "Other"

    def test_query_awards_uses_composite_key_condition(self, mock_boto3_resource):
        mock_table = mock_boto3_resource.return_value.Table.return_value
        mock_table.query.return_value = {"Items": [], "Count": 0}

        AwardsTable(table_name="Awards").query_awards(1234, "Academy")

        mock_table.query.assert_called_once_with(
            KeyConditionExpression=Key("movieId").eq(1234)
            & Key("awardBody").eq("Academy")
        )

    def test_query_awards_replaces_decimals(self, mock_boto3_resource):
        mock_table = mock_boto3_resource.return_value.Table.return_value
        mock_table.query.return_value = {
            "Items": [
                {
                    "movieId": Decimal("1234"),
                    "awardBody": "Academy",
                    "numAwards": Decimal("5"),
                    "rating": Decimal("8.5"),
                    "categories": [Decimal("1"), {"year": Decimal("1999")}],
                }
            ]
        }

        items = AwardsTable(table_name="Awards").query_awards(1234, "Academy")

        assert items == [
            {
                "movieId": 1234,
                "awardBody": "Academy",
                "numAwards": 5,
                "rating": 8.5,
                "categories": [1, {"year": 1999}],
            }
        ]
        assert isinstance(items[0]["numAwards"], int)

    def test_query_awards_missing_items_key(self, mock_boto3_resource):
        mock_table = mock_boto3_resource.return_value.Table.return_value
        mock_table.query.return_value = {}

        assert AwardsTable(table_name="Awards").query_awards(1, "Academy") == []

    def test_query_awards_reraises_client_error(self, mock_boto3_resource):
        mock_table = mock_boto3_resource.return_value.Table.return_value
        mock_table.query.side_effect = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "No table"}},
            "Query",
        )

        with pytest.raises(ClientError):
            AwardsTable(table_name="Awards").query_awards(1, "Academy")


class TestGetAwardsTable:
    def test_client_is_built_once_and_reused(self):
        get_awards_table.cache_clear()
        with patch("common.dynamo_client.boto3.resource") as mock_resource:
            first = get_awards_table()
            second = get_awards_table()

        assert first is second
        mock_resource.assert_called_once()
        get_awards_table.cache_clear()
