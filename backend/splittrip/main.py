"""
FastAPI entrypoint for SplitTrip backend application.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from splittrip.core.config import settings
from splittrip.core.exceptions import (
    Conflict, InvalidAmount, InvalidSplit, NotFound,
    PermissionDenied, SplitTripError, TripNotActive, UnbalancedLedger
)
from splittrip.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SplitTrip API",
    description="Backend API for splitting shared trip expenses",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# First match wins; any other SplitTripError maps to 400
ERROR_STATUS = [
    (InvalidAmount, status.HTTP_400_BAD_REQUEST),
    (InvalidSplit, status.HTTP_400_BAD_REQUEST),
    (UnbalancedLedger, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (PermissionDenied, status.HTTP_403_FORBIDDEN),
    (Conflict, status.HTTP_409_CONFLICT),
    (TripNotActive, status.HTTP_409_CONFLICT),
]


def status_for(exc: SplitTripError) -> int:
    for exc_type, code in ERROR_STATUS:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_400_BAD_REQUEST


@app.exception_handler(SplitTripError)
async def splittrip_error_handler(request: Request, exc: SplitTripError):
    """Translate domain errors into JSON responses."""
    code = status_for(exc)
    if code >= 500:
        logger.error(f"{type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=code,
        content={"detail": str(exc), "type": type(exc).__name__}
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "SplitTrip API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("splittrip.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
