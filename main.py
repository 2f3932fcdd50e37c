import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.users import router as users_router
from config import Settings, settings
from services.github_client import GitHubClient
from utils.observability import setup_logging

logger = logging.getLogger(__name__)

MSG_RESOURCE_NOT_FOUND = "Resource isn't found"
DOCS_URL = "/docs"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "github_client", None) is None:
        app.state.github_client = GitHubClient.from_settings(app.state.settings)
    logger.info("Server running on port %s", app.state.settings.server_port)
    yield
    await app.state.github_client.aclose()


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes and methods send browsers to the docs and everyone else a JSON 404."""
    if exc.status_code not in (404, 405):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)
    if "text/html" in request.headers.get("accept", ""):
        return RedirectResponse(DOCS_URL)
    return JSONResponse(status_code=404, content={"error": MSG_RESOURCE_NOT_FOUND})


def create_app(app_settings: Settings = settings) -> FastAPI:
    setup_logging(app_settings.log_level, app_settings.log_format)

    app = FastAPI(
        title=app_settings.app_name,
        description="A simple RESTful API integrated with GitHub REST API to get users and their repositories",
        version="1.0.0",
        license_info={"name": "MIT", "url": "https://spdx.org/licenses/MIT.html"},
        contact={"name": "JandroMejia97", "email": "alejandromejia2012.27@gmail.com"},
        docs_url=DOCS_URL,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.github_client = None

    if app_settings.cors_origin_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_origin_list,
            allow_methods=app_settings.cors_method_list,
            allow_headers=["*"],
        )

    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.include_router(users_router)

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
