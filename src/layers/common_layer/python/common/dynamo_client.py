import functools
import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from decimal import Decimal
from typing import Any, Dict, List, Optional
from loguru import logger

from common import configs


class AwardsTable:
    """Read access to the awards table, keyed by (movieId, awardBody)."""

    def __init__(self, table_name: Optional[str] = None, region: Optional[str] = None):
        self.table_name = table_name or configs.AWARDS_TABLE_NAME
        self.region = region or configs.REGION

        self.resource = boto3.resource("dynamodb", region_name=self.region)
        self.table = self.resource.Table(self.table_name)

    def _replace_decimals(self, obj):
        """Recursively converts Decimal to int/float for JSON serialization."""
        if isinstance(obj, list):
            return [self._replace_decimals(i) for i in obj]
        elif isinstance(obj, dict):
            return {k: self._replace_decimals(v) for k, v in obj.items()}
        elif isinstance(obj, Decimal):
            return int(obj) if obj % 1 == 0 else float(obj)
        return obj

    def query_awards(self, movie_id: int, award_body: str) -> List[Dict[str, Any]]:
        key_condition = Key("movieId").eq(movie_id) & Key("awardBody").eq(award_body)
        logger.info(
            "Querying {} where movieId = {} AND awardBody = {}",
            self.table_name,
            movie_id,
            award_body,
        )

        try:
            response = self.table.query(KeyConditionExpression=key_condition)
        except ClientError as e:
            logger.error(f"Error querying awards: {e.response['Error']['Message']}")
            raise

        return self._replace_decimals(response.get("Items", []))


@functools.lru_cache(maxsize=None)
def get_awards_table() -> AwardsTable:
    """Process-wide table client, built on first use."""
    return AwardsTable()
