import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import ledger_router, router as accounts_router, transfer_router
from .core.config import get_settings
from .core.dependencies import get_ledger_service
from .demo import build_demo_ledger

settings = get_settings()
logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    service = app.dependency_overrides.get(get_ledger_service, get_ledger_service)()
    if settings.seed_demo_accounts and service.is_empty():
        service.register(build_demo_ledger())
        logger.info("ledger.seeded", extra={"total_balance": service.total_balance()})
    yield

app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.include_router(accounts_router)
app.include_router(transfer_router)
app.include_router(ledger_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
