# app/obs.py
import os, uuid, json, datetime, traceback, contextvars, logging
from typing import Mapping
from app.settings import CFG

# set per request by the middleware in app/main.py
trace_id_var = contextvars.ContextVar("trace_id", default=None)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(service)s %(trace_id)s"


class RequestContextFilter(logging.Filter):
    """Stamp every record with the service name and the current request's trace id."""

    def filter(self, record):
        record.service = CFG.SERVICE_NAME
        record.trace_id = trace_id_var.get() or "-"
        return True


def setup_json_logging(level: str = None):
    """
    One JSON line per log record on stderr, for the whole process.
    Replaces any handlers already on the root logger.
    """
    from pythonjsonlogger import jsonlogger

    root = logging.getLogger()
    root.setLevel(level or CFG.LOG_LEVEL)
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))
    handler.addFilter(RequestContextFilter())
    root.addHandler(handler)


def bind_trace_id(headers: Mapping[str, str]) -> str:
    # reuse the caller's id when it sends one
    tid = headers.get("x-trace-id") or headers.get("x-request-id") or uuid.uuid4().hex
    trace_id_var.set(tid)
    return tid


def current_trace_id() -> str:
    return trace_id_var.get() or ""


def log_exception(exc: Exception, context: dict = None, error_log: str = None) -> str:
    """Write full traceback + context to the error log and return unique id."""
    err_id = f"err_{uuid.uuid4().hex[:8]}"
    entry = {
        "id": err_id,
        "time": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "trace_id": current_trace_id(),
        "context": context or {},
        "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        "exc_str": str(exc),
    }
    path = error_log or CFG.ERROR_LOG
    try:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError:
        logger.warning("failed to write error log", extra={"path": path, "error_id": err_id})
    logger.error(str(exc), extra={"error_id": err_id, **(context or {})})
    return err_id


def read_last_error(error_log: str = None):
    """Last JSON entry of the error log, or None."""
    path = error_log or CFG.ERROR_LOG
    if not os.path.exists(path):
        return None
    last = None
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                last = json.loads(line)
            except ValueError:
                # skip non-json lines
                continue
    return last
