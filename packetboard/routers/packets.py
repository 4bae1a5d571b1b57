import re
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ..deps import get_db
from ..services.packet_query import PAGE_LIMIT, fetch_packets

router = APIRouter(prefix="", tags=["packets"])

# 부호 + ASCII 숫자만, signed 64-bit 범위
_CURSOR_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1

def parse_cursor(raw: Optional[str], default: int = 0) -> int:
    """Parse-or-default: a missing or non-integer cursor means `default`, never an error."""
    if raw is None or not _CURSOR_RE.fullmatch(raw):
        return default
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return default
    return value

@router.get("/packets")
def list_packets(after_id: Optional[str] = Query(None), db: Session = Depends(get_db)):
    packets = fetch_packets(db, parse_cursor(after_id), PAGE_LIMIT)
    return JSONResponse([p.model_dump(mode="json") for p in packets])

@router.get("/health")
def health():
    return {"ok": True}
