import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.auth import router as auth_router
from app.api.customers import router as customers_router
from app.api.invoices import router as invoices_router
from app.core.config import get_settings
from app.core.exceptions import PersistenceError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Invoices Dashboard API",
    version="0.1.0",
)


@app.exception_handler(PersistenceError)
def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
    # list views only; actions turn storage failures into their own message
    logger.exception("Database error on %s", request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Database Error"})


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(customers_router)
app.include_router(invoices_router)
