from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from ..deps import get_db
from ..services.packet_query import PAGE_LIMIT, fetch_packets

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(prefix="", tags=["dashboard"])
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

@router.get("/", response_class=HTMLResponse)
def dashboard(db: Session = Depends(get_db)):
    # 템플릿을 먼저 로드 -> 없거나 깨졌으면 jinja2.TemplateError
    tmpl = templates.get_template("dashboard.html")
    packets = fetch_packets(db, 0, PAGE_LIMIT)
    rows = [p.model_dump(mode="json") for p in packets]
    return HTMLResponse(tmpl.render(packets=rows, page_limit=PAGE_LIMIT))
