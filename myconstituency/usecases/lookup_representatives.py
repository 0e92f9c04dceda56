import asyncio
import logging
from typing import Dict, List, Optional, Tuple

import aiohttp

from myconstituency.config import Config
from myconstituency.errors import MyConstituencyError, NotFound, UpstreamUnavailable
from myconstituency.infra.geogratis import GeoGratisGeocoder
from myconstituency.infra.represent import RepresentGateway
from myconstituency.model import LookupResult, Representative
from myconstituency.representatives.geocoding import GeocodeError
from myconstituency.representatives.overrides import Overrides, load_overrides
from myconstituency.representatives.postal import province_from_postal, validate_postal
from myconstituency.representatives.reconcile import find_premier, find_prime_minister, reconcile
from myconstituency.serialization import json_list_to_representatives, lookup_result_to_json

logger = logging.getLogger(__name__)

NOT_FOUND = "We couldn't find that postal code."
POSTAL_NOTE = ("Postal codes can sometimes map to multiple districts. If anything looks off, "
               "add an address-based confirmation step (geocoding) for 100% accuracy.")
FALLBACK_NOTE = ("This must be a new neighbourhood. We couldn't find that exact postal code, "
                 "but here's the closest match based on location.")

TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class LookupRepresentatives:
    def __init__(self, config: Config, represent: RepresentGateway, geocoder: GeoGratisGeocoder,
                 overrides: Optional[Overrides] = None):
        self.config = config
        self.represent = represent
        self.geocoder = geocoder
        self.overrides = overrides

    async def lookup(self, postal: str) -> Tuple[Dict, int]:
        """
        Returns the json payload and an http-like status code. Never raises.
        """
        try:
            return lookup_result_to_json(await self._lookup(postal)), 200
        except MyConstituencyError as e:
            logger.warning("lookup for %r failed: %s", postal, e)
            return e.to_json(), e.status
        except TRANSPORT_ERRORS as e:
            logger.warning("lookup for %r failed: %s", postal, e)
            return {"error": f"Upstream request failed: {e}"}, 502
        except Exception as e:
            logger.exception("lookup for %r failed unexpectedly", postal)
            return {"error": str(e) or "Lookup failed"}, 500

    async def _lookup(self, raw_postal) -> LookupResult:
        postal = validate_postal(raw_postal)

        data = await self.represent.postcode(postal)
        if data is None:
            logger.info("%s unknown to Represent, falling back to geocoding", postal)
            reps = await self._representatives_near(postal)
            province_code = province_from_postal(postal)
            city, province, note = None, None, FALLBACK_NOTE
        else:
            # centroid first, concordance as fallback
            reps = json_list_to_representatives(data.get("representatives_centroid")) \
                + json_list_to_representatives(data.get("representatives_concordance"))
            province_code = data.get("province") or province_from_postal(postal)
            city, province, note = data.get("city"), data.get("province"), POSTAL_NOTE

        premier, prime_minister = await self._officeholders(province_code)
        buckets = reconcile(reps, province_code, postal, premier, prime_minister, self.overrides)

        return LookupResult(postal=postal, reps=buckets, city=city, province=province, note=note)

    async def _representatives_near(self, postal: str) -> List[Representative]:
        try:
            coordinates = await self.geocoder.geocode(postal)
        except GeocodeError as e:
            raise NotFound(NOT_FOUND, {"step": "geocode", "geo": e.to_json(), "postal": postal})
        except TRANSPORT_ERRORS as e:
            geo = {"ok": False, "reason": str(e) or type(e).__name__, "url": self.geocoder.locate_url(postal)}
            raise NotFound(NOT_FOUND, {"step": "geocode", "geo": geo, "postal": postal})

        geo = {"ok": True, "lat": coordinates.lat, "lon": coordinates.lon, "url": self.geocoder.locate_url(postal)}
        endpoint = self.represent.point_url(coordinates.lat, coordinates.lon)

        try:
            reps = await self.represent.representatives_by_point(coordinates.lat, coordinates.lon)
        except (UpstreamUnavailable,) + TRANSPORT_ERRORS as e:
            status = e.upstream_status if isinstance(e, UpstreamUnavailable) else None
            raise NotFound(NOT_FOUND, {
                "step": "represent_point_lookup_failed",
                "reps": {"ok": False, "status": status, "endpoint": endpoint},
                "geo": geo,
                "postal": postal,
            })

        if not reps:
            raise NotFound(NOT_FOUND, {
                "step": "represent_point_lookup_empty",
                "endpoint": endpoint,
                "geo": geo,
                "postal": postal,
            })

        return reps

    async def _officeholders(self, province_code):
        premier, prime_minister = await asyncio.gather(
            self._premier(province_code),
            self._prime_minister(),
            return_exceptions=True)
        return _or_none(premier, "premier"), _or_none(prime_minister, "prime minister")

    async def _premier(self, province_code) -> Optional[Representative]:
        path = await self.represent.legislature_representatives_path(province_code)
        if not path:
            return None
        return find_premier(await self.represent.all_representatives(path))

    async def _prime_minister(self) -> Optional[Representative]:
        return find_prime_minister(await self.represent.house_of_commons())


def _or_none(result, what):
    if isinstance(result, Exception):
        logger.warning("%s not found: %s", what, result)
        return None
    if result is None:
        logger.info("%s not found", what)
    return result


async def lookup_representatives(config: Config, postal: str, overrides: Optional[Overrides] = None) -> Tuple[Dict, int]:
    if overrides is None:
        overrides = load_overrides(config.overrides_file)

    async with aiohttp.ClientSession(headers={"User-Agent": config.user_agent}) as session:
        usecase = LookupRepresentatives(config, RepresentGateway(config, session), GeoGratisGeocoder(config, session),
                                        overrides)
        return await usecase.lookup(postal)
