"""
Find the latest Votes & Proceedings PDF on the Legislative Assembly of Alberta's records index,
see https://www.assembly.ab.ca/assembly-business/assembly-records/votes-and-proceedings.
"""
import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

PDF_HREF = re.compile(r"""href\s*=\s*["']([^"' ]+\.pdf)["']""", re.IGNORECASE)
VP_FILENAME_DATE = re.compile(r"(\d{8})_\d{4}_\d{2}_vp\.pdf", re.IGNORECASE)
VP_PATH_MARKERS = ("/vp/", "_vp", "houserecords")


def extract_pdf_links(html: str, site_root: str) -> List[str]:
    return [_to_absolute(href, site_root).replace("&amp;", "&").replace("\\", "/")
            for href in PDF_HREF.findall(html or "")]


def _to_absolute(href: str, site_root: str) -> str:
    if href.startswith("http"):
        return href
    if href.startswith("//"):
        return f"https:{href}"
    if href.startswith("/"):
        return f"{site_root}{href}"
    return f"{site_root}/{href}"


def is_votes_and_proceedings(url: str, records_host: str) -> bool:
    lowered = url.lower()
    return records_host.lower() in lowered and any(marker in lowered for marker in VP_PATH_MARKERS)


def vp_sitting_date(url: str) -> int:
    """@return the YYYYMMDD number embedded in a VP filename, or 0 when there is none"""
    match = VP_FILENAME_DATE.search(url)
    return int(match.group(1)) if match else 0


def extract_latest_vp_pdf_url(html: str, site_root: str, records_host: str) -> Optional[str]:
    vp_urls = [url for url in extract_pdf_links(html, site_root) if is_votes_and_proceedings(url, records_host)]
    if not vp_urls:
        logger.info("no Votes & Proceedings PDF links found on the index page")
        return None

    # sorted() is stable, so undated links keep page order behind the dated ones
    latest = sorted(vp_urls, key=vp_sitting_date, reverse=True)
    return latest[0]
