from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, List


# one entry of the regions JSON file
class RegionEntry(BaseModel):
    name: str
    name_en: str = ""
    polygons: List[Any] = []

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        """Reject blank names, they can never be guessed"""
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise ValueError("region name must not be empty")
        return value

    @field_validator("name_en", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    @field_validator("polygons", mode="before")
    @classmethod
    def keep_raw_polygons(cls, value):
        """Geometry is checked point by point when the graph is built"""
        if not isinstance(value, (list, tuple)):
            return []
        return list(value)


class Region(RegionEntry):
    """A catalog region. `id` is its position in the catalog."""
    model_config = ConfigDict(frozen=True)

    id: int

    @property
    def label(self) -> str:
        if not self.name_en:
            return self.name
        return f"{self.name} ({self.name_en})"


class RegionRead(BaseModel):
    id: int
    name: str
    name_en: str
    label: str

    @classmethod
    def from_region(cls, region: Region) -> "RegionRead":
        return cls(id=region.id, name=region.name, name_en=region.name_en, label=region.label)


class RegionDetail(RegionRead):
    neighbours: List[RegionRead]
