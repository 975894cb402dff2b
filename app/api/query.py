# app/api/query.py
import logging
from typing import Any, Dict, Optional
from botocore.exceptions import BotoCoreError
from fastapi import APIRouter
from pydantic import ValidationError
from app.models import DataResponse, Frame, QueryDataRequest, QueryDataResponse, QueryModel
from app.obs import log_exception
from app.settings import CFG, SettingsError, load_plugin_settings
from frames.scanner import ScanError, create_client, scan_table
from frames.table import extract_table

router = APIRouter()
logger = logging.getLogger(__name__)

STATUS_BAD_REQUEST = 400


def run_query(query: Dict[str, Any], instance_settings: Optional[Dict[str, Any]] = None) -> DataResponse:
    """
    Handle one query: validate, scan the table, turn the items into one frame named after refId.
    Failures come back as an error DataResponse, never as an exception.
    """
    try:
        qm = QueryModel.model_validate(query)
    except ValidationError as e:
        return DataResponse.failed(STATUS_BAD_REQUEST, f"json unmarshal: {e}")

    try:
        settings = load_plugin_settings(instance_settings)
    except SettingsError as e:
        return DataResponse.failed(STATUS_BAD_REQUEST, f"failed to load plugin settings: {e}")

    if not qm.table_name:
        return DataResponse.failed(STATUS_BAD_REQUEST, "tableName is required in the query")

    try:
        client = create_client(
            settings.secrets.access_key_id,
            settings.secrets.secret_access_key,
            session_token=settings.secrets.session_token,
            region=settings.region,
            endpoint_url=settings.endpoint_url,
        )
    except (BotoCoreError, ValueError) as e:
        log_exception(e, context={"ref_id": qm.ref_id, "table_name": qm.table_name})
        return DataResponse.failed(STATUS_BAD_REQUEST, f"failed to create AWS session: {e}")

    try:
        items = scan_table(client, qm.table_name, page_size=CFG.SCAN_PAGE_SIZE)
    except ScanError as e:
        log_exception(e, context={"ref_id": qm.ref_id, "table_name": qm.table_name})
        return DataResponse.failed(STATUS_BAD_REQUEST, f"failed to scan DynamoDB table {qm.table_name}: {e.cause}")

    table = extract_table(items)
    logger.info("query done", extra={"ref_id": qm.ref_id, "table_name": qm.table_name,
                                     "rows": table.row_count, "columns": len(table.columns)})
    return DataResponse(frames=[Frame.from_table(qm.ref_id, table)])


@router.post("/query", response_model=QueryDataResponse, response_model_exclude_none=True)
def query_data(req: QueryDataRequest):
    # queries are independent; results keyed by refId
    response = QueryDataResponse()
    settings = req.instance_settings()
    for q in req.queries:
        ref_id = q.get("refId") if isinstance(q.get("refId"), str) else "A"
        response.results[ref_id] = run_query(q, settings)
    return response
