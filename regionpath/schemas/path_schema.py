from pydantic import BaseModel
from typing import List

from regionpath.schemas.region_schema import RegionRead


class PathRead(BaseModel):
    regions: List[RegionRead]
    steps: int # intermediate regions, 0 for neighbours or an empty path
    description: str
