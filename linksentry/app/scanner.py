"""
scanner.py

Entry point of the URL risk engine: normalize, run the rules, aggregate the
score and compose the final AnalysisResult.
"""

import logging

from .heuristics import evaluate_rules
from .models import AnalysisResult, Indicator
from .scoring import band_for, clamp_score, raw_score
from .validation import EmptyInput, normalize_url, parse_url

logger = logging.getLogger("scanner")

FILLER_INDICATORS = (
    Indicator(
        category='safe',
        title='Domain Appears Legitimate',
        description='No major phishing indicators detected',
    ),
    Indicator(
        category='safe',
        title='Standard URL Structure',
        description='The URL follows normal conventions',
    ),
)


def compose_indicators(indicators: list) -> list:
    """Pad a clean result so it never shows a lone HTTPS line.

    Only a list made of exactly one safe indicator
    gets the fillers, whatever the score.
    """
    if len(indicators) == 1 and indicators[0].category == 'safe':
        return indicators + list(FILLER_INDICATORS)
    return indicators


def analyze(url: str) -> AnalysisResult:
    """
    Score a URL string and explain the score.

    Raises EmptyInput for blank input and InvalidURL when the normalized
    string does not parse. Otherwise returns an immutable AnalysisResult:

        {
          "normalized_url": "http://paypa1-login.tk/verify-account",
          "raw_score": 95,
          "score": 95,
          "risk_level": "critical",
          "risk_label": "Critical Risk",
          "recommendation": "...",
          "indicators": [...]
        }
    """
    value = (url or '').strip()
    if not value:
        raise EmptyInput()

    parts = parse_url(normalize_url(value))
    indicators = evaluate_rules(parts)
    total = raw_score(indicators)
    score = clamp_score(total)
    band = band_for(score)

    result = AnalysisResult(
        normalized_url=parts.url,
        raw_score=total,
        score=score,
        risk_level=band.level,
        risk_label=band.label,
        recommendation=band.recommendation,
        indicators=tuple(compose_indicators(indicators)),
    )
    logger.debug("analyzed %s: score=%d level=%s indicators=%d",
                 parts.url, score, band.level, len(result.indicators))
    return result
