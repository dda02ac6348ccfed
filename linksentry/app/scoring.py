"""Score aggregation: sum indicator weights, clamp, and map to a risk level."""

from collections import namedtuple

MAX_SCORE = 100

Band = namedtuple('Band', ['level', 'upper', 'label', 'recommendation'])

# Inclusive upper bounds, checked in order; the last band catches the rest.
RISK_BANDS = (
    Band('safe', 10, 'Safe',
         'This URL appears to be legitimate with no major red flags detected.'),
    Band('low', 30, 'Low Risk',
         'This URL has minor concerns but is likely safe. Exercise normal caution.'),
    Band('medium', 50, 'Medium Risk',
         'This URL shows several warning signs. Verify the source before proceeding.'),
    Band('high', 75, 'High Risk',
         'This URL has multiple phishing indicators. Avoid entering sensitive information.'),
    Band('critical', None, 'Critical Risk',
         'This URL is highly suspicious and likely a phishing attempt. Do not proceed.'),
)


def raw_score(indicators) -> int:
    return sum(i.weight for i in indicators)


def clamp_score(score: int) -> int:
    return max(0, min(MAX_SCORE, int(score)))


def band_for(score: int) -> Band:
    for band in RISK_BANDS:
        if band.upper is None or score <= band.upper:
            return band
    return RISK_BANDS[-1]


def risk_level(score: int) -> str:
    return band_for(score).level
