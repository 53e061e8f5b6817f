from fastapi import APIRouter, Depends, Query
from typing import List

from regionpath.schemas import PathRead, RegionDetail, RegionRead
from regionpath.services import RegionCatalog, RegionServices, get_catalog


router = APIRouter()


# get a list of regions (GET)
@router.get("/", response_model=List[RegionRead])
async def get_regions(catalog: RegionCatalog = Depends(get_catalog)):
    """List all regions sorted by name"""
    services = RegionServices(catalog)
    return services.list_regions()


# shortest path between two regions
@router.get("/path", response_model=PathRead)
async def get_path(
    start: str = Query(..., description="Start region id or name"),
    end: str = Query(..., description="Target region id or name"),
    catalog: RegionCatalog = Depends(get_catalog),
):
    """Shortest path between two regions"""
    services = RegionServices(catalog)
    return services.find_path(start, end)


# Get region by id
@router.get("/{region_id}", response_model=RegionDetail)
async def get_region(region_id: int, catalog: RegionCatalog = Depends(get_catalog)):
    """Fetch one region with its neighbours"""
    services = RegionServices(catalog)
    return services.get_region(region_id)
