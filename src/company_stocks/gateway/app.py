import logging
from contextlib import asynccontextmanager
from importlib.metadata import version

from fastapi import FastAPI

from company_stocks.database.connection import create_tables, engine
from company_stocks.gateway.routers import companies, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Start-up logic
    try:
        await create_tables()
        logger.info("Database tables ready")
        yield
    except Exception as e:
        logger.error(f"Error during startup: {e}")
        raise
    finally:
        # Release pooled connections once we're done.
        await engine.dispose()
        logger.info("Database engine disposed")


package_version = version("company-stocks")
app = FastAPI(
    title="Company Stocks Service",
    version=package_version,
    lifespan=lifespan,
)

# We have separate routers for each of the resources.
app.include_router(health.router)
app.include_router(companies.router)
