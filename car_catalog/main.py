"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from car_catalog.adapters.inbound.http.cars_routes import router as cars_router
from car_catalog.adapters.inbound.http.matches_routes import router as matches_router
from car_catalog.adapters.inbound.http.routes import router
from car_catalog.infrastructure.config.settings import settings

# Load environment variables from .env file
load_dotenv()


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with one message per problem."""
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": details},
    )


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=settings.api_title,
        description="Vehicle listings catalog with a liked cars tracker",
        version="0.1.0",
    )
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(router)
    app.include_router(cars_router)
    app.include_router(matches_router)
    return app


app = create_app()
