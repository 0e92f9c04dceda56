import logging
from typing import Optional

import fitz

from myconstituency.errors import PayloadMismatch

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF-"


def is_pdf(data: bytes) -> bool:
    return bool(data) and data[:len(PDF_SIGNATURE)] == PDF_SIGNATURE


def pdf_bytes_to_text(data: bytes, source_url: Optional[str] = None) -> str:
    """
    Flatten a PDF into text: the text spans of every page in document order joined by spaces,
    one line per page. No layout reconstruction is attempted.
    """
    if not is_pdf(data):
        preview = (data or b"")[:10].decode("utf-8", errors="replace")
        raise PayloadMismatch(source_url, preview)

    pages = []
    with fitz.open(stream=data, filetype="pdf") as pdf_doc:
        for page in pdf_doc:
            pages.append(" ".join(_page_spans(page)))

    if not pages:
        logger.warning("PDF %s has no pages", source_url)

    return "\n".join(pages).strip()


def _page_spans(page):
    for block in page.get_text("dict")["blocks"]:
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                if span.get("text"):
                    yield span["text"]
