from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from postaddress.api.routes import router
from postaddress.core.config import get_settings
from postaddress.core.logging import configure_logging, get_logger
from postaddress.domain.address import AddressValidationError


settings = get_settings()
configure_logging(settings.debug, settings.log_format)

_logger = get_logger(__name__)

app = FastAPI(title="PostAddress API", version="0.1.0", debug=settings.debug)

app.include_router(router)


@app.exception_handler(AddressValidationError)
async def address_validation_error_handler(
    request: Request, exc: AddressValidationError
) -> JSONResponse:
    _logger.info(
        "Rejected address input",
        path=request.url.path,
        raw_text=exc.text,
        reason=exc.reason,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc), "reason": exc.reason},
    )


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Return basic service health."""

    return {"status": "ok"}
