from unittest.mock import MagicMock
import pytest
from botocore.exceptions import ClientError, EndpointConnectionError
from frames.scanner import ScanError, create_client, scan_table


def _client_with_pages(pages):
    client = MagicMock()
    client.get_paginator.return_value.paginate.return_value = pages
    return client


def test_scan_follows_all_pages():
    client = _client_with_pages([
        {"Items": [{"id": {"S": "1"}}, {"id": {"S": "2"}}], "LastEvaluatedKey": {"id": {"S": "2"}}},
        {"Items": [{"id": {"S": "3"}}]},
    ])
    items = scan_table(client, "users")
    assert [i["id"]["S"] for i in items] == ["1", "2", "3"]
    client.get_paginator.assert_called_once_with("scan")
    client.get_paginator.return_value.paginate.assert_called_once_with(TableName="users")


def test_scan_page_size_is_forwarded():
    client = _client_with_pages([{"Items": []}])
    assert scan_table(client, "users", page_size=25) == []
    client.get_paginator.return_value.paginate.assert_called_once_with(
        TableName="users", PaginationConfig={"PageSize": 25}
    )


def test_scan_page_without_items():
    client = _client_with_pages([{"Count": 0}])
    assert scan_table(client, "empty") == []


def test_client_error_is_wrapped():
    err = ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "Requested resource not found"}}, "Scan")
    client = MagicMock()
    client.get_paginator.return_value.paginate.side_effect = err
    with pytest.raises(ScanError) as exc_info:
        scan_table(client, "missing")
    assert exc_info.value.table_name == "missing"
    assert exc_info.value.cause is err


def test_connection_error_is_wrapped():
    client = MagicMock()
    client.get_paginator.return_value.paginate.side_effect = EndpointConnectionError(endpoint_url="http://localhost:1")
    with pytest.raises(ScanError):
        scan_table(client, "users")


def test_create_client_defaults_region():
    client = create_client("AKIDEXAMPLE", "secret")
    assert client.meta.region_name == "us-east-1"


def test_create_client_endpoint_and_region():
    client = create_client("AKIDEXAMPLE", "secret", session_token="", region="eu-west-1",
                           endpoint_url="http://localhost:8000")
    assert client.meta.region_name == "eu-west-1"
    assert client.meta.endpoint_url == "http://localhost:8000"
