import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from minidrive.core.config import Settings, get_settings
from minidrive.core.exceptions import MiniDriveError
from minidrive.core.logging import configure_logging
from minidrive.routers import auth, files

PACKAGE_DIR = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")
logger = logging.getLogger(__name__)


def render_error(request: Request, exc: MiniDriveError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="minidrive")
    app.state.settings = settings

    app.add_middleware(SessionMiddleware, secret_key=settings.secret_key)
    app.add_exception_handler(MiniDriveError, render_error)
    app.mount("/static", StaticFiles(directory=PACKAGE_DIR / "static"), name="static")

    # include our routers
    app.include_router(auth.router)
    app.include_router(files.router)

    @app.get("/", response_class=HTMLResponse)
    def home(request: Request):
        return templates.TemplateResponse(request, "index.html")

    logger.info("Storing data in %s", settings.base_dir)
    return app


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server starting on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
