# app/api/health.py
import datetime
from typing import Optional
from fastapi import APIRouter
from app.models import CheckHealthRequest, CheckHealthResult
from app.settings import SettingsError, load_plugin_settings

router = APIRouter()


def check_health(instance_settings: Optional[dict] = None) -> CheckHealthResult:
    # only checks that credentials are configured; no AWS call
    try:
        config = load_plugin_settings(instance_settings)
    except SettingsError:
        return CheckHealthResult(status="ERROR", message="Unable to load settings")
    if not config.secrets.access_key_id:
        return CheckHealthResult(status="ERROR", message="AWS Access Key ID is missing")
    if not config.secrets.secret_access_key:
        return CheckHealthResult(status="ERROR", message="AWS Secret Access Key is missing")
    return CheckHealthResult(status="OK", message="Data source is working")


@router.get("/health")
async def health():
    return {"status": "ok", "time": datetime.datetime.now(datetime.timezone.utc).isoformat()}


@router.post("/health", response_model=CheckHealthResult)
def check_health_endpoint(req: CheckHealthRequest):
    return check_health(req.instance_settings())
