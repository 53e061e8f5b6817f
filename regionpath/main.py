import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from regionpath.core.database import init_db
from regionpath.routers import game_routers, region_routers
from regionpath.services import RegionCatalog, get_catalog
from regionpath.utils.logger_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Create database tables
    init_db()
    # load regions and build the adjacency graph once, fail fast on bad data
    catalog = app.dependency_overrides.get(get_catalog, get_catalog)()
    logger.info("Region catalog ready: %d regions", len(catalog))
    yield


# create FastAPI
app = FastAPI(title="Region Path API", version="1.0", lifespan=lifespan)

# get routers
app.include_router(region_routers.router, prefix="/regions", tags=["Regions"])
app.include_router(game_routers.router, prefix="/games", tags=["Games"])


@app.get("/health")
async def health(catalog: RegionCatalog = Depends(get_catalog)):
    return {"status": "ok", "regions": len(catalog)}
