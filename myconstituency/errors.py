from typing import Dict, Optional


class MyConstituencyError(Exception):
    status = 500

    def to_json(self) -> Dict:
        return {"error": str(self)}


class ValidationError(MyConstituencyError):
    """Malformed input, rejected before any network call."""
    status = 400


class NotFound(MyConstituencyError):
    status = 404

    def __init__(self, message: str, debug: Optional[Dict] = None):
        super().__init__(message)
        self.debug = debug

    def to_json(self) -> Dict:
        result = super().to_json()
        if self.debug is not None:
            result["debug"] = self.debug
        return result


class UpstreamUnavailable(MyConstituencyError):
    status = 502

    def __init__(self, what: str, upstream_status: int, url: str):
        super().__init__(f"{what} failed: {upstream_status}")
        self.upstream_status = upstream_status
        self.url = url

    def to_json(self) -> Dict:
        result = super().to_json()
        result["upstream_status"] = self.upstream_status
        return result


class PayloadMismatch(MyConstituencyError):
    """The bytes fetched for a PDF do not start with the PDF signature."""
    status = 502

    def __init__(self, url: Optional[str], preview: str):
        super().__init__("Not a PDF response")
        self.url = url
        self.preview = preview

    def to_json(self) -> Dict:
        result = super().to_json()
        result["pdfUrl"] = self.url
        result["firstBytes"] = self.preview
        return result
