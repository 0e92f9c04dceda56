import asyncio

import pytest

from myconstituency.config import Environments, _create_config
from myconstituency.infra.geogratis import GeoGratisGeocoder
from myconstituency.representatives.geocoding import Coordinates, GeocodeError
from tests.fake_http import FakeSession, undecodable

config = _create_config(Environments.TEST)

LOCATE_URL = "https://geocoder.example/locate?q=T2P%201J9"


def test_locate_url_uses_spaced_postal():
    assert GeoGratisGeocoder(config, FakeSession()).locate_url("t2p1j9") == LOCATE_URL


def test_geocode():
    session = FakeSession({LOCATE_URL: (200, [{"geometry": {"coordinates": [-114.07, 51.04]}}])})

    assert asyncio.run(GeoGratisGeocoder(config, session).geocode("T2P1J9")) == Coordinates(lat=51.04, lon=-114.07)


def test_http_error():
    session = FakeSession({LOCATE_URL: (500, None)})

    with pytest.raises(GeocodeError) as exc_info:
        asyncio.run(GeoGratisGeocoder(config, session).geocode("T2P1J9"))

    assert exc_info.value.to_json() == {"ok": False, "reason": "http_error", "status": 500, "url": LOCATE_URL}


def test_empty_payload_keeps_url():
    session = FakeSession({LOCATE_URL: (200, [])})

    with pytest.raises(GeocodeError) as exc_info:
        asyncio.run(GeoGratisGeocoder(config, session).geocode("T2P1J9"))

    assert exc_info.value.reason == "empty"
    assert exc_info.value.url == LOCATE_URL
    assert exc_info.value.status == 200


def test_body_that_is_not_json():
    session = FakeSession({LOCATE_URL: (200, undecodable())})

    with pytest.raises(GeocodeError) as exc_info:
        asyncio.run(GeoGratisGeocoder(config, session).geocode("T2P1J9"))

    assert exc_info.value.to_json() == {"ok": False, "reason": "undecodable", "status": 200, "url": LOCATE_URL}
