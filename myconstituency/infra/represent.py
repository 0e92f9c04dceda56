import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import aiohttp
from aiohttp import ClientSession

from myconstituency.config import Config
from myconstituency.errors import UpstreamUnavailable
from myconstituency.model import Representative
from myconstituency.representatives.provinces import LEGISLATURE_SET_NAME_BY_CODE, normalize_province_code
from myconstituency.serialization import json_list_to_representatives

logger = logging.getLogger(__name__)

HOUSE_OF_COMMONS_PATH = "/representatives/house-of-commons/"


class RepresentGateway:
    """Client for the Represent API by Open North, see https://represent.opennorth.ca/api/."""

    def __init__(self, config: Config, session: ClientSession):
        self.config = config
        self.session = session
        self.base_url = config.represent_base_url
        self.timeout = aiohttp.ClientTimeout(total=config.http_timeout_seconds)

    async def postcode(self, postal: str) -> Optional[Dict]:
        """@return the postcode document, or None when Represent doesn't know the postal code"""
        return await self._get_json(self.postcode_url(postal), "Postal lookup", allow_not_found=True)

    def postcode_url(self, postal: str) -> str:
        return f"{self.base_url}/postcodes/{quote(postal)}/"

    def point_url(self, lat: float, lon: float) -> str:
        return f"{self.base_url}/representatives/?point={lat},{lon}"

    async def representatives_by_point(self, lat: float, lon: float) -> List[Representative]:
        data = await self._get_json(self.point_url(lat, lon), "Point lookup")
        return json_list_to_representatives((data or {}).get("objects"))

    async def legislature_representatives_path(self, province_code: str) -> Optional[str]:
        expected_name = LEGISLATURE_SET_NAME_BY_CODE.get(normalize_province_code(province_code) or "")
        if not expected_name:
            return None

        data = await self._get_json(f"{self.base_url}/representative-sets/?format=json&limit=0", "Representative sets")
        sets = (data or {}).get("objects")
        for rep_set in sets if isinstance(sets, list) else []:
            if str(rep_set.get("name") or "").lower() == expected_name.lower():
                return (rep_set.get("related") or {}).get("representatives_url")

        logger.warning("no representative set named %r", expected_name)
        return None

    async def all_representatives(self, path: str) -> List[Representative]:
        """
        Follow meta.next until it runs out, for at most represent.max_pages pages.
        """
        result = []
        next_url = f"{self.base_url}{path}?format=json&limit={self.config.represent_page_size}"

        for page_number in range(self.config.represent_max_pages):
            data = await self._get_json(next_url, "Representatives page")
            result.extend(json_list_to_representatives((data or {}).get("objects")))

            next_url = self._absolute(((data or {}).get("meta") or {}).get("next"))
            if not next_url:
                return result

        logger.warning("stopped paging %s after %d pages", path, self.config.represent_max_pages)
        return result

    async def house_of_commons(self) -> List[Representative]:
        return await self.all_representatives(HOUSE_OF_COMMONS_PATH)

    def _absolute(self, url) -> Optional[str]:
        if not isinstance(url, str) or not url:
            return None
        return url if url.startswith("http") else f"{self.base_url}{url}"

    async def _get_json(self, url: str, what: str, allow_not_found: bool = False):
        logger.info("GET %s", url)
        async with self.session.get(url, headers={'Accept': 'application/json'}, timeout=self.timeout) as response:
            if allow_not_found and response.status == 404:
                return None
            if not 200 <= response.status < 300:
                raise UpstreamUnavailable(what, response.status, url)
            try:
                data = await response.json(content_type=None)
            except (ValueError, aiohttp.ContentTypeError):
                data = None
            # every Represent endpoint answers with a json object
            if not isinstance(data, dict):
                logger.error("%s returned something other than a json object: %s", what, url)
                raise UpstreamUnavailable(what, response.status, url)
            return data
