import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from regionpath.core.database import Base, get_db
from regionpath.main import app
from regionpath.schemas import Region
from regionpath.services import RegionCatalog, get_catalog


def square(x, y, size=1.0):
    """Open ring of an axis aligned square with lower left corner (x, y)"""
    return [[x, y], [x + size, y], [x + size, y + size], [x, y + size]]


@pytest.fixture
def make_region():
    def _make(region_id, polygons, name=None, name_en=None):
        return Region(
            id=region_id,
            name=name or f"Region {region_id}",
            name_en=name_en or f"Region-{region_id}",
            polygons=polygons,
        )
    return _make


@pytest.fixture
def grid_regions(make_region):
    """cols x rows unit squares, ids row by row from the lower left"""
    def _grid(cols, rows):
        regions = []
        for r in range(rows):
            for c in range(cols):
                regions.append(make_region(len(regions), [square(float(c), float(r))]))
        return regions
    return _grid


LINE_NAMES = [("Alpha", "Alfa"), ("Bravo", "Brawo"), ("Charlie", "Carli"), ("Delta", "Delto")]


@pytest.fixture
def line_catalog():
    """Four regions in a row; the only challenge with 4+ regions is Alpha <-> Delta"""
    entries = [
        {"name": name, "name_en": name_en, "polygons": [square(float(index), 0.0)]}
        for index, (name, name_en) in enumerate(LINE_NAMES)
    ]
    return RegionCatalog.from_entries(entries)


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def client(db_session, line_catalog):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: line_catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
