import logging

import requests

from myconstituency.config import Config
from myconstituency.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


class AlbertaAssemblyGateway:
    def __init__(self, config: Config):
        self.config = config

    def fetch_votes_index(self) -> str:
        response = self._get(self.config.votes_index_url, "text/html", "Index fetch")
        return response.text

    def fetch_pdf(self, url: str) -> bytes:
        response = self._get(url, "application/pdf", "PDF fetch")
        return response.content

    def _get(self, url, accept, what):
        logger.info("GET %s", url)
        response = requests.get(url, headers={
            "Accept": accept,
            "User-Agent": self.config.user_agent,
        }, timeout=self.config.http_timeout_seconds)

        if not response.ok:
            logger.error("%s failed with status %d: %s", what, response.status_code, url)
            raise UpstreamUnavailable(what, response.status_code, url)

        return response
