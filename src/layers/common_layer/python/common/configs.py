import os

AWARDS_TABLE_NAME = os.environ.get("AWARDS_TABLE_NAME", "Awards")
REGION = os.environ.get("REGION") or os.environ.get("AWS_REGION")
