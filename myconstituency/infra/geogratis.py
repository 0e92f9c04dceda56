import logging
from urllib.parse import quote

import aiohttp
from aiohttp import ClientSession

from myconstituency.config import Config
from myconstituency.representatives.geocoding import Coordinates, GeocodeError, decode_coordinates
from myconstituency.representatives.postal import spaced_postal

logger = logging.getLogger(__name__)


class GeoGratisGeocoder:
    """Postal code search on the GeoGratis geolocation service of Natural Resources Canada."""

    def __init__(self, config: Config, session: ClientSession):
        self.config = config
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=config.http_timeout_seconds)

    def locate_url(self, postal: str) -> str:
        return f"{self.config.geocoder_url}?q={quote(spaced_postal(postal))}"

    async def geocode(self, postal: str) -> Coordinates:
        url = self.locate_url(postal)
        logger.info("GET %s", url)
        async with self.session.get(url, headers={'Accept': 'application/json'}, timeout=self.timeout) as response:
            if not 200 <= response.status < 300:
                raise GeocodeError("http_error", url, response.status)
            try:
                payload = await response.json(content_type=None)
            except (ValueError, aiohttp.ContentTypeError):
                raise GeocodeError("undecodable", url, response.status)

        try:
            return decode_coordinates(payload)
        except GeocodeError as e:
            raise GeocodeError(e.reason, url, response.status) from e
