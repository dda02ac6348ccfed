from .models import AnalysisResult, Indicator, UrlParts
from .scanner import analyze
from .validation import EmptyInput, InvalidURL, URLValidationError, normalize_url, validate_url

__all__ = [
    "AnalysisResult",
    "EmptyInput",
    "Indicator",
    "InvalidURL",
    "URLValidationError",
    "UrlParts",
    "analyze",
    "normalize_url",
    "validate_url",
]
