from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from Security.security_config import SETTINGS
from Security.activity_logging import ActivityLoggingMiddleware, get_file_logger
from Security.audit_trail import set_audit_request_context, clear_audit_request_context
from Security.method_override import MethodOverrideMiddleware
from Security.request_id import RequestIdMiddleware
from Security.xss_protection import XSSProtectionMiddleware

from .database import engine, Base
from .app_context import STATIC_DIR
from .contact_routes import register_contact_routes
from .error_handlers import register_error_handlers

logger = get_file_logger("contacts.app", "app.log")


def create_tables() -> None:
    """Create missing tables; existing ones are left untouched."""
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Schema ready on %s", engine.url.get_backend_name())


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    yield


app = FastAPI(title="Contacts", lifespan=lifespan)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR), check_dir=False), name="static")

register_contact_routes(app)
register_error_handlers(app)


@app.middleware("http")
async def bind_audit_context(request: Request, call_next):
    token = set_audit_request_context(request)
    try:
        return await call_next(request)
    finally:
        clear_audit_request_context(token)


# Last added runs first: request id -> activity log -> headers -> method override -> audit context.
app.add_middleware(MethodOverrideMiddleware)
if SETTINGS["SECURITY_HEADERS_ENABLED"]:
    app.add_middleware(XSSProtectionMiddleware)
app.add_middleware(ActivityLoggingMiddleware)
app.add_middleware(RequestIdMiddleware)
