import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.core.config import settings
from app.core.error_handlers import install_error_handlers
from app.core.http_hardening import REQUEST_ID_HEADER, install_http_hardening
from app.api.router import router as api_router
from app.services.pagination import PAGINATION_HEADER
from app.services.property_mapping import build_property_mapping_registry

logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
app.state.property_mappings = build_property_mapping_registry()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[PAGINATION_HEADER, REQUEST_ID_HEADER, "Location"],
)
install_http_hardening(app)
install_error_handlers(app)

app.include_router(api_router, prefix="/api")

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}
