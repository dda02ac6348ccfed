"""
heuristics.py

Explainable, rule-based URL heuristics for phishing detection.

Every rule is a pure function ``rule(parts) -> iterable of Indicator``. The
rules run in RULES order and that order is the order of the indicator list.
Lookup tables are plain data: extend them here without touching the rules.

Public function:
    evaluate_rules(parts: UrlParts) -> list

Example:
    >>> from linksentry.app.validation import parse_url
    >>> [i.title for i in evaluate_rules(parse_url("http://192.168.1.10/login"))]
    ['No HTTPS Encryption', 'IP Address Instead of Domain', 'Suspicious Keywords Found']
"""

import re
from types import MappingProxyType

from .models import Indicator, UrlParts

# Configuration: weights, thresholds and lookup tables (tweakable)
WEIGHT_NO_HTTPS = 15
WEIGHT_IP_HOST = 25
WEIGHT_SUSPICIOUS_TLD = 20
WEIGHT_MANY_SUBDOMAINS = 15
WEIGHT_LOOKALIKE = 30
WEIGHT_SHORTENER = 15
WEIGHT_PER_KEYWORD = 10
WEIGHT_AT_SYMBOL = 25
WEIGHT_ODD_PORT = 10
WEIGHT_LONG_URL = 10
WEIGHT_HYPHENS = 10
WEIGHT_NON_ASCII = 20

MAX_HOST_LABELS = 4
MAX_URL_LENGTH = 75
MAX_HOST_HYPHENS = 2
STANDARD_PORTS = frozenset({80, 443})
KEYWORDS_SHOWN = 3

SUSPICIOUS_TLDS = (
    '.tk', '.ml', '.ga', '.cf', '.gq', '.pw', '.top', '.work', '.date',
    '.racing', '.review', '.download', '.stream', '.science', '.cricket',
)

SUSPICIOUS_KEYWORDS = (
    'login', 'verify', 'secure', 'account', 'update', 'confirm', 'banking',
    'suspended', 'locked', 'unusual', 'click', 'urgent', 'password', 'signin',
    'wallet', 'crypto',
)

URL_SHORTENERS = (
    'bit.ly', 'tinyurl.com', 'goo.gl', 'ow.ly', 't.co', 'is.gd', 'buff.ly',
    'adf.ly', 'short.io',
)

BRAND_LOOKALIKES = MappingProxyType({
    'paypal': ('paypa1', 'paypai', 'paypall', 'paypa-', 'paypa_'),
    'google': ('gooogle', 'googie', 'goog1e', 'gogle'),
    'amazon': ('amazom', 'amaz0n', 'arnazon', 'amazon-'),
    'microsoft': ('micros0ft', 'micosoft', 'microsft', 'micro-soft'),
    'facebook': ('faceb00k', 'facebo0k', 'facebok', 'face-book'),
    'apple': ('app1e', 'appl3', 'aple', 'apple-'),
    'netflix': ('netf1ix', 'netfl1x', 'netflex', 'net-flix'),
    'instagram': ('instagr4m', 'insta-gram', 'instaqram'),
    'github': ('githib', 'gith-ub', 'git-hub'),
    'linkedin': ('link3din', 'linked-in', 'linkedln'),
})

IP_RE = re.compile(r'^(?:https?://)?\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}', re.IGNORECASE)

HTTPS_SAFE = Indicator(
    category='safe',
    title='HTTPS Detected',
    description='The URL uses secure HTTPS protocol',
)


def check_https(parts: UrlParts):
    if parts.scheme == 'http':
        yield Indicator(
            category='warning',
            title='No HTTPS Encryption',
            description='The URL uses HTTP instead of HTTPS, which is less secure',
            weight=WEIGHT_NO_HTTPS,
        )
    else:
        yield HTTPS_SAFE


def check_ip_host(parts: UrlParts):
    if IP_RE.match(parts.url):
        yield Indicator(
            category='danger',
            title='IP Address Instead of Domain',
            description='Legitimate websites rarely use IP addresses directly',
            weight=WEIGHT_IP_HOST,
        )


def check_tld(parts: UrlParts):
    tld = next((t for t in SUSPICIOUS_TLDS if parts.hostname.endswith(t)), None)
    if tld:
        yield Indicator(
            category='danger',
            title='Suspicious Top-Level Domain',
            description=f'The TLD "{tld}" is commonly used in phishing attacks',
            weight=WEIGHT_SUSPICIOUS_TLD,
        )


def check_subdomains(parts: UrlParts):
    labels = parts.hostname.split('.')
    if len(labels) > MAX_HOST_LABELS:
        yield Indicator(
            category='warning',
            title='Excessive Subdomains',
            description=f'Found {len(labels) - 2} subdomains, which may indicate obfuscation',
            weight=WEIGHT_MANY_SUBDOMAINS,
        )


def check_lookalikes(parts: UrlParts):
    # one hit per brand; several brands may each match
    for brand, variants in BRAND_LOOKALIKES.items():
        variant = next((v for v in variants if v in parts.hostname), None)
        if variant:
            yield Indicator(
                category='danger',
                title='Look-alike Domain Detected',
                description=f'Domain contains "{variant}" which mimics "{brand}"',
                weight=WEIGHT_LOOKALIKE,
            )


def check_shortener(parts: UrlParts):
    if any(s in parts.hostname for s in URL_SHORTENERS):
        yield Indicator(
            category='warning',
            title='URL Shortener Detected',
            description='Shortened URLs can hide the true destination',
            weight=WEIGHT_SHORTENER,
        )


def _find_keywords(s: str) -> list:
    """Return suspicious keywords contained in the lowercased string, in table order."""
    s = s.lower()
    return [kw for kw in SUSPICIOUS_KEYWORDS if kw in s]


def check_keywords(parts: UrlParts):
    found = _find_keywords(parts.url)
    if found:
        yield Indicator(
            category='warning',
            title='Suspicious Keywords Found',
            description='Contains keywords often used in phishing: '
                        + ', '.join(found[:KEYWORDS_SHOWN]),
            weight=WEIGHT_PER_KEYWORD * len(found),
        )


def check_at_symbol(parts: UrlParts):
    if '@' in parts.url:
        yield Indicator(
            category='danger',
            title='Suspicious @ Symbol',
            description='The @ symbol can be used to hide the actual domain',
            weight=WEIGHT_AT_SYMBOL,
        )


def check_port(parts: UrlParts):
    if parts.port is not None and parts.port not in STANDARD_PORTS:
        yield Indicator(
            category='warning',
            title='Unusual Port Number',
            description=f'Non-standard port {parts.port} detected',
            weight=WEIGHT_ODD_PORT,
        )


def check_length(parts: UrlParts):
    if len(parts.url) > MAX_URL_LENGTH:
        yield Indicator(
            category='warning',
            title='Unusually Long URL',
            description='Very long URLs can be used to hide malicious content',
            weight=WEIGHT_LONG_URL,
        )


def check_hyphens(parts: UrlParts):
    hyphens = parts.hostname.count('-')
    if hyphens > MAX_HOST_HYPHENS:
        yield Indicator(
            category='warning',
            title='Excessive Hyphens in Domain',
            description=f'Found {hyphens} hyphens, which may indicate typosquatting',
            weight=WEIGHT_HYPHENS,
        )


def check_non_ascii(parts: UrlParts):
    if not parts.hostname.isascii():
        yield Indicator(
            category='danger',
            title='Non-ASCII Characters Detected',
            description='Unicode characters can be used for homograph attacks',
            weight=WEIGHT_NON_ASCII,
        )


RULES = (
    check_https,
    check_ip_host,
    check_tld,
    check_subdomains,
    check_lookalikes,
    check_shortener,
    check_keywords,
    check_at_symbol,
    check_port,
    check_length,
    check_hyphens,
    check_non_ascii,
)


def evaluate_rules(parts: UrlParts, rules=RULES) -> list:
    """Run each rule over the parsed URL and collect indicators in rule order."""
    indicators = []
    for rule in rules:
        indicators.extend(rule(parts))
    return indicators
