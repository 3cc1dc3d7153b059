"""FastAPI application exposing the Lingoletics authorization model."""

import json
import logging
import os

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request  # noqa: E402
from fastapi.exceptions import HTTPException  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402

from lingoletics.shared.errors import create_error_response, http_status_to_error_code  # noqa: E402
from lingoletics.shared.rbac import InvalidRBACValueError  # noqa: E402

from .invitations.routes import router as invitations_router  # noqa: E402
from .languages.routes import router as languages_router  # noqa: E402
from .roles.routes import router as roles_router  # noqa: E402

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def get_cors_origins() -> list:
    """Allowed CORS origins from CORS_ORIGINS (JSON list)."""
    origins_json = os.environ.get("CORS_ORIGINS", "[]")
    try:
        origins = json.loads(origins_json)
        if isinstance(origins, list):
            return origins
    except json.JSONDecodeError:
        logger.warning(f"Invalid CORS_ORIGINS format: {origins_json}, using default")
    return []


app = FastAPI(title="Lingoletics App API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(roles_router)
app.include_router(invitations_router)
app.include_router(languages_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Wrap plain string details in the shared error envelope."""
    if isinstance(exc.detail, dict) and "error" in exc.detail:
        content = exc.detail
    else:
        content = create_error_response(
            http_status_to_error_code(exc.status_code),
            str(exc.detail),
            status_code=exc.status_code,
        )
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(InvalidRBACValueError)
async def invalid_rbac_value_handler(request: Request, exc: InvalidRBACValueError):
    # Unknown role/action/language reaching the model is a caller bug, not a denial.
    logger.error(f"Invalid RBAC input on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content=create_error_response(
            http_status_to_error_code(500),
            "Internal authorization error",
            status_code=500,
        ),
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
