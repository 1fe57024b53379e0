import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from advisor.api.routes import router as api_router
from advisor.core.config import settings
from advisor.core.log import configure_logging
from advisor.services.store import get_store

logger = logging.getLogger(__name__)

configure_logging(settings.log_level)

app = FastAPI(title="Course Advisor API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.on_event("startup")
def on_startup():
    # Optional catalog preload; a missing file leaves the catalog empty
    if settings.catalog_path:
        result = get_store().load_file(settings.catalog_path, encoding=settings.catalog_encoding)
        if not result.ok:
            logger.error("Startup catalog %s not loaded", settings.catalog_path)


@app.get("/health")
def health_check():
    return {"status": "ok", "courses": len(get_store().snapshot())}
