"""FastAPI API endpoints under /api.

Endpoint groups: health, conversion (convert, convert/file, parse, formats).
The converter itself is pure; these routes only unwrap request bodies, call
backend.conversion and wrap the {success, data, stats} envelope.
"""

from fastapi import APIRouter

from .convert import router as convert_router
from .health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(convert_router)
