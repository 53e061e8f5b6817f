from regionpath.services.catalog_services import CatalogError, RegionCatalog, get_catalog
from regionpath.services.game_services import GameServices
from regionpath.services.region_services import RegionServices
