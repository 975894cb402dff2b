# app/api/errors.py
from fastapi import APIRouter, HTTPException
from app.obs import read_last_error

router = APIRouter()


@router.get("/last_error")
def last_error():
    entry = read_last_error()
    if entry is None:
        raise HTTPException(status_code=404, detail="no json errors found")
    return entry
