import logging

from fastapi import FastAPI

from cvextract.api.routes.extract import router as extract_router
from cvextract.core.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="Rule-based CV extraction service: personal details, education, qualifications, work history, skills and links from CV text",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(extract_router)


@app.get("/", tags=["health"])
def root():
    return {"service": "cvextract", "status": "running"}


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}
