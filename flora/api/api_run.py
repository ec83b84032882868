from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from flora.domain.errors import FloraError
from flora.events.event_helpers import notify_error
from flora.events.web_observers import start as start_notice_observers, get_notices

# Routers
from flora.api.routes import account, favorites, plants

# Logging
logger = logging.getLogger("flora_app")

# Initialize FastAPI app
app = FastAPI(title="Flora Plant Catalog API")

app.include_router(account.router)
app.include_router(plants.router)
app.include_router(favorites.router)

start_notice_observers()


# === Error boundary: every failure becomes {"error": ...} plus a user notice ===
@app.exception_handler(FloraError)
async def flora_error_handler(request: Request, exc: FloraError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    notify_error(exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    notify_error(message)
    return JSONResponse(status_code=422, content={"error": message, "details": jsonable_errors(errors)})


def jsonable_errors(errors):
    return [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in errors]


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/notifications")
def notifications(since: Optional[int] = Query(None, ge=0)):
    """Poll user-facing notices newer than ``since``."""
    return get_notices(since)
