import dataclasses
import logging
from typing import Dict, Optional, Tuple

from myconstituency.config import Config
from myconstituency.errors import MyConstituencyError, ValidationError
from myconstituency.infra.assembly import AlbertaAssemblyGateway
from myconstituency.serialization import vote_record_to_json
from myconstituency.text import norm
from myconstituency.votes.divisions import find_division_blocks, votes_in_divisions
from myconstituency.votes.locator import extract_latest_vp_pdf_url
from myconstituency.votes.pdf_text import pdf_bytes_to_text

logger = logging.getLogger(__name__)

JURISDICTION = "Alberta"
NO_PDF_NOTE = "No VP PDF found."
NO_VOTES_NOTE = "No recorded votes found in the latest Votes & Proceedings PDF."
NO_TEXT_NOTE = "The latest Votes & Proceedings PDF has no extractable text."


class LatestAlbertaVotes:
    def __init__(self, config: Config, assembly: AlbertaAssemblyGateway):
        self.config = config
        self.assembly = assembly

    def latest_votes(self, name: str, riding: Optional[str] = None, debug: bool = False) -> Tuple[Dict, int]:
        """
        Returns the json payload and an http-like status code. Never raises.
        """
        try:
            return self._latest_votes(name, riding, debug), 200
        except MyConstituencyError as e:
            logger.warning("alberta votes for %r failed: %s", name, e)
            return e.to_json(), e.status
        except Exception as e:
            logger.exception("alberta votes for %r failed unexpectedly", name)
            return {"error": str(e) or "Failed to load Alberta votes"}, 500

    def _latest_votes(self, name, riding, debug):
        name = norm(name)
        riding = norm(riding) or None
        if not name:
            raise ValidationError("Missing name")

        diagnostics = []
        html = self.assembly.fetch_votes_index()
        pdf_url = extract_latest_vp_pdf_url(html, self.config.site_root, self.config.records_host)

        if not pdf_url:
            return {"jurisdiction": JURISDICTION, "mla": {"name": name}, "items": [], "note": NO_PDF_NOTE}

        diagnostics.append({"step": "latest_pdf", "pdfUrl": pdf_url})

        pdf_text = pdf_bytes_to_text(self.assembly.fetch_pdf(pdf_url), pdf_url)
        diagnostics.append({"step": "pdf_text", "textLen": len(pdf_text)})

        text = norm(pdf_text)
        divisions = find_division_blocks(text)
        diagnostics.append({"step": "divisions", "count": len(divisions)})

        records = votes_in_divisions(text, divisions, name, riding, self.config.max_title_length)
        records = [dataclasses.replace(record, official_url=pdf_url)
                   for record in records[:self.config.max_vote_items]]

        result = {
            "jurisdiction": JURISDICTION,
            "mla": {"name": name, "riding": riding},
            "items": [vote_record_to_json(record) for record in records],
        }
        if not records:
            result["note"] = NO_VOTES_NOTE if pdf_text else NO_TEXT_NOTE
        if debug:
            result["diagnostics"] = diagnostics

        return result
