# frames/scanner.py
import logging
from typing import Any, Dict, List, Optional
import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

DEFAULT_REGION = "us-east-1"


class ScanError(RuntimeError):
    def __init__(self, table_name: str, cause: Exception):
        super().__init__(f"{table_name}: {cause}")
        self.table_name = table_name
        self.cause = cause


def create_client(access_key_id: str, secret_access_key: str, session_token: Optional[str] = None,
                  region: Optional[str] = None, endpoint_url: Optional[str] = None):
    """
    Build a DynamoDB client from static credentials.
    endpoint_url: set for DynamoDB Local / LocalStack, None for AWS.
    """
    session = boto3.session.Session(
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        aws_session_token=session_token or None,
        region_name=region or DEFAULT_REGION,
    )
    return session.client("dynamodb", endpoint_url=endpoint_url or None)


def scan_table(client: Any, table_name: str, page_size: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Scan a whole table, following LastEvaluatedKey across pages.
    Returns the raw items (field -> wire attribute value) in scan order.
    Raises ScanError on any AWS/botocore failure.
    """
    params: Dict[str, Any] = {"TableName": table_name}
    if page_size:
        params["PaginationConfig"] = {"PageSize": int(page_size)}
    items: List[Dict[str, Any]] = []
    pages = 0
    try:
        paginator = client.get_paginator("scan")
        for page in paginator.paginate(**params):
            pages += 1
            items.extend(page.get("Items", []))
    except (BotoCoreError, ClientError) as exc:
        raise ScanError(table_name, exc) from exc
    logger.info("scanned table", extra={"table": table_name, "pages": pages, "items": len(items)})
    return items
