import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

CORS_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def create_app(skip_malformed: bool | None = None) -> FastAPI:
    resolved = _env_flag("SKIP_MALFORMED_ENTRIES") if skip_malformed is None else skip_malformed
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    app = FastAPI(title="FancyNPCs Converter")
    app.state.skip_malformed = resolved
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=CORS_HEADERS,
        expose_headers=["Content-Disposition", "X-Original-Count", "X-Converted-Count"],
    )
    app.include_router(router, prefix="/api")
    return app


# Default app instance for uvicorn (reads SKIP_MALFORMED_ENTRIES / CORS_ORIGINS)
app = create_app()
