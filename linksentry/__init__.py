"""LinkSentry: explainable heuristic URL risk scoring."""

from .app import AnalysisResult, EmptyInput, Indicator, InvalidURL, analyze, validate_url

__version__ = "1.0.0"

__all__ = ["AnalysisResult", "EmptyInput", "Indicator", "InvalidURL", "analyze", "validate_url", "__version__"]
