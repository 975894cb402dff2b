import pytest
from fastapi.testclient import TestClient
from app.settings import CFG


@pytest.fixture
def wire_items():
    """Items as the DynamoDB scan returns them: id/name strings, one boolean."""
    return [
        {"id": {"S": "1"}, "name": {"S": "a"}},
        {"id": {"S": "2"}},
        {"name": {"S": "c"}, "active": {"BOOL": True}},
    ]


@pytest.fixture
def error_log(tmp_path, monkeypatch):
    path = tmp_path / "store" / "errors.log"
    monkeypatch.setattr(CFG, "ERROR_LOG", str(path))
    return path


@pytest.fixture
def client(error_log):
    from app.main import app
    return TestClient(app)


@pytest.fixture
def instance_settings():
    return {
        "jsonData": {"region": "eu-west-1"},
        "decryptedSecureJsonData": {"accessKeyId": "AKIDEXAMPLE", "secretAccessKey": "secret"},
    }
