# src/frame_mover/api/main.py
from fastapi import APIRouter, FastAPI

from frame_mover.core.config import get_settings
from frame_mover.core.logging import configure_logging
from frame_mover.core.registry import load_module_routers


def create_app(routers: list[APIRouter] | None = None) -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="FrameMover", version=settings.VERSION, debug=settings.DEBUG)
    configure_logging(settings.LOG_LEVEL, json=settings.LOG_JSON)

    for r in routers if routers is not None else load_module_routers():
        app.include_router(r, prefix="/api")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
