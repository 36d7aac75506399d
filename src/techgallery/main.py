"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from techgallery.config import settings
from techgallery.routers import skills

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Tech Gallery Skills API",
    description="Backend API for users' technology skill ratings",
    version="0.1.0",
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as bad requests (400) rather than 422."""
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


# Mount routers
app.include_router(skills.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.backend_host, port=settings.backend_port)
