import pytest

from crop_tracker.db import init_db
from crop_tracker.harvests import add_harvest, list_harvests
from crop_tracker.models import Harvest, ValidationError


@pytest.fixture
def conn():
    connection = init_db(":memory:")
    connection.execute(
        "INSERT INTO fields(name, area_ha, region) VALUES(?, ?, ?)",
        ("Test Field", 100.5, "Test Region"),
    )
    connection.commit()
    yield connection
    connection.close()


def test_add_valid_harvest(conn):
    harvest = Harvest(field_id=1, crop="Wheat", yield_t_per_ha=4.5)
    created = add_harvest(conn, harvest)
    assert created.id != 0
    assert created.field_id == 1
    assert created.crop == "Wheat"
    assert created.yield_t_per_ha == 4.5


def test_add_harvest_unknown_field(conn):
    with pytest.raises(ValidationError, match="field does not exist"):
        add_harvest(conn, Harvest(field_id=999, crop="Wheat", yield_t_per_ha=4.5))
    assert list_harvests(conn) == []


def test_add_harvest_missing_crop(conn):
    with pytest.raises(ValidationError, match="crop is required"):
        add_harvest(conn, Harvest(field_id=1, yield_t_per_ha=4.5))


def test_add_harvest_negative_yield(conn):
    with pytest.raises(ValidationError, match="yield_t_per_ha must be non-negative"):
        add_harvest(conn, Harvest(field_id=1, crop="Wheat", yield_t_per_ha=-1.0))


def test_add_harvest_zero_yield_allowed(conn):
    created = add_harvest(conn, Harvest(field_id=1, crop="Wheat", yield_t_per_ha=0.0))
    assert list_harvests(conn) == [created]


def test_add_harvest_non_positive_field_id(conn):
    with pytest.raises(ValidationError, match="field_id is required and must be positive"):
        add_harvest(conn, Harvest(field_id=0, crop="Wheat", yield_t_per_ha=4.5))


def test_list_harvests(conn):
    test_harvests = [
        Harvest(field_id=1, crop="Wheat", yield_t_per_ha=4.5),
        Harvest(field_id=1, crop="Corn", yield_t_per_ha=6.7),
    ]
    for harvest in test_harvests:
        conn.execute(
            "INSERT INTO harvests(field_id, crop, yield_t_per_ha) VALUES(?, ?, ?)",
            (harvest.field_id, harvest.crop, harvest.yield_t_per_ha),
        )
    conn.commit()

    response = list_harvests(conn)
    assert len(response) == len(test_harvests)
    for expected, got in zip(test_harvests, response):
        assert got.id != 0
        assert got.field_id == expected.field_id
        assert got.crop == expected.crop
        assert got.yield_t_per_ha == expected.yield_t_per_ha