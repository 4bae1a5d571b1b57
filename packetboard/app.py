import logging, os
from contextlib import asynccontextmanager

import jinja2
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .settings import settings
from .deps import engine, ping
from .errors import DataAccessError
from .routers.dashboard import router as dashboard_router
from .routers.packets import router as packets_router

LOG = logging.getLogger("packetboard")
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(message)s")

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not os.path.exists(".env"):
        LOG.info("No .env file found, using environment variables")
    # DB 연결 확인 실패 시 기동 중단
    try:
        ping(engine)
    except Exception:
        LOG.exception("Error connecting to database")
        raise
    yield
    engine.dispose()

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

@app.exception_handler(DataAccessError)
def on_data_access_error(request: Request, exc: DataAccessError):
    LOG.error("Database error: %s", exc, exc_info=exc)
    return PlainTextResponse("Error fetching data", status_code=500)

@app.exception_handler(jinja2.TemplateError)
def on_template_error(request: Request, exc: jinja2.TemplateError):
    LOG.error("Template error: %s", exc, exc_info=exc)
    return PlainTextResponse("Error loading template", status_code=500)

app.include_router(dashboard_router)
app.include_router(packets_router, prefix="/api")

def main():
    import uvicorn
    LOG.info("Server starting on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    main()
