# app/main.py

from fastapi import FastAPI, Request
from app.api.query import router as query_router
from app.api.health import router as health_router
from app.api.errors import router as errors_router
from app.obs import setup_json_logging, bind_trace_id

setup_json_logging()

app = FastAPI(title="DynamoDB Table Data")

app.include_router(query_router, prefix="")
app.include_router(health_router, prefix="")
app.include_router(errors_router, prefix="")


@app.middleware("http")
async def trace_id_middleware(request: Request, call_next):
    tid = bind_trace_id(request.headers)
    resp = await call_next(request)
    resp.headers["x-trace-id"] = tid
    return resp
