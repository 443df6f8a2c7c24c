from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

from sharelink.core.config import settings
from sharelink.core.errors import LinkError
from sharelink.core.logging_config import configure_logging
from sharelink.api import links

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Encodes and parses shareable contact and group links"
)

app.include_router(links.router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "sharelink"}

@app.exception_handler(LinkError)
async def link_error_handler(request: Request, exc: LinkError):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "code": exc.code}
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
