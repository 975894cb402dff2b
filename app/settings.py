# app/settings.py
import os, json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _int_or_none(raw: Optional[str]) -> Optional[int]:
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


# --- TUNABLES (env) ----------------------------------------------------------
@dataclass
class ServiceConfig:
    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "dynamodb-table-data")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    # one JSON line per failed query (traceback + context)
    ERROR_LOG: str = os.getenv("ERROR_LOG", os.path.join(os.getcwd(), "store", "errors.log"))
    AWS_REGION: str = os.getenv("AWS_REGION", "us-east-1")
    # DynamoDB Local / LocalStack
    DYNAMODB_ENDPOINT_URL: Optional[str] = os.getenv("DYNAMODB_ENDPOINT_URL") or None
    SCAN_PAGE_SIZE: Optional[int] = _int_or_none(os.getenv("SCAN_PAGE_SIZE"))


CFG = ServiceConfig()
# ----------------------------------------------------------------------------


class SettingsError(ValueError):
    pass


@dataclass
class SecretPluginSettings:
    access_key_id: str = ""
    secret_access_key: str = ""
    session_token: str = ""


@dataclass
class PluginSettings:
    region: str = ""
    endpoint_url: Optional[str] = None
    secrets: SecretPluginSettings = field(default_factory=SecretPluginSettings)


def _load_json_data(raw: Any) -> Dict[str, Any]:
    if raw is None or raw == "":
        return {}
    if isinstance(raw, (bytes, str)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            raise SettingsError(f"could not unmarshal PluginSettings json: {e}") from e
    if not isinstance(raw, dict):
        raise SettingsError("could not unmarshal PluginSettings json: expected an object")
    return raw


def _load_secrets(source: Optional[Dict[str, str]]) -> SecretPluginSettings:
    if source is None:
        # no decrypted secure data in the request -> process environment
        return SecretPluginSettings(
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID", ""),
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY", ""),
            session_token=os.getenv("AWS_SESSION_TOKEN", ""),
        )
    return SecretPluginSettings(
        access_key_id=source.get("accessKeyId", "") or "",
        secret_access_key=source.get("secretAccessKey", "") or "",
        session_token=source.get("sessionToken", "") or "",
    )


def load_plugin_settings(instance_settings: Optional[Dict[str, Any]] = None) -> PluginSettings:
    """
    Build PluginSettings from data source instance settings:
      {"jsonData": {"region": ..., "endpointUrl": ...},
       "decryptedSecureJsonData": {"accessKeyId": ..., "secretAccessKey": ..., "sessionToken": ...}}
    Missing values fall back to CFG / environment. Raises SettingsError on malformed jsonData.
    """
    instance_settings = instance_settings or {}
    json_data = _load_json_data(instance_settings.get("jsonData"))
    return PluginSettings(
        region=json_data.get("region") or CFG.AWS_REGION,
        endpoint_url=json_data.get("endpointUrl") or CFG.DYNAMODB_ENDPOINT_URL,
        secrets=_load_secrets(instance_settings.get("decryptedSecureJsonData")),
    )
