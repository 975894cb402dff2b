import pytest
from app.settings import CFG, SettingsError, load_plugin_settings


def test_loads_json_data_and_secrets(instance_settings):
    settings = load_plugin_settings(instance_settings)
    assert settings.region == "eu-west-1"
    assert settings.secrets.access_key_id == "AKIDEXAMPLE"
    assert settings.secrets.secret_access_key == "secret"
    assert settings.secrets.session_token == ""


def test_json_data_as_string():
    settings = load_plugin_settings({"jsonData": '{"endpointUrl": "http://localhost:8000"}',
                                     "decryptedSecureJsonData": {}})
    assert settings.endpoint_url == "http://localhost:8000"
    assert settings.region == CFG.AWS_REGION


@pytest.mark.parametrize("json_data", ["{not json", "[1, 2]", 42])
def test_malformed_json_data(json_data):
    with pytest.raises(SettingsError):
        load_plugin_settings({"jsonData": json_data})


def test_secrets_fall_back_to_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDENV")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")
    monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)
    settings = load_plugin_settings(None)
    assert settings.secrets.access_key_id == "AKIDENV"
    assert settings.secrets.secret_access_key == "envsecret"
    assert settings.secrets.session_token == ""


def test_present_secure_data_does_not_read_environment(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDENV")
    settings = load_plugin_settings({"decryptedSecureJsonData": {"secretAccessKey": "s"}})
    assert settings.secrets.access_key_id == ""
