"""Main Flask API for LinkSentry.

Run: python -m linksentry.api
"""

import os
import logging
from flask import Flask, request, jsonify, abort
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import redis as redis_lib

from . import __version__
from .app import analyze, URLValidationError, EmptyInput
from .db import init_db, save_scan, list_scans, get_scan
from .passwords import (
    PasswordOptionsError,
    calculate_strength,
    generate_for_user,
    validate_against_personal_data,
)

# Logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("api")

# Flask app
app = Flask(__name__)

RATELIMIT_ENABLED = os.getenv("LINKSENTRY_RATELIMIT", "1") != "0"
DEFAULT_PASSWORD_LENGTH = 16


def _make_limiter(flask_app: Flask) -> Limiter:
    """Prefer Redis storage when REDIS_URL is set and reachable."""
    redis_url = os.getenv("REDIS_URL")
    if redis_url:
        try:
            redis_lib.from_url(redis_url).ping()
            logger.info("Using Redis at %s for rate limiting", redis_url)
            return Limiter(key_func=get_remote_address, app=flask_app, default_limits=["60 per minute"],
                           storage_uri=redis_url, enabled=RATELIMIT_ENABLED)
        except redis_lib.RedisError:
            logger.exception("Failed to connect to Redis, falling back to in-memory limiter")
    return Limiter(key_func=get_remote_address, app=flask_app, default_limits=["60 per minute"],
                   enabled=RATELIMIT_ENABLED)


limiter = _make_limiter(app)

# API key
API_KEY = os.getenv("LINKSENTRY_API_KEY", None)
if API_KEY:
    logger.info("API key enabled")

init_db()


def require_api_key() -> None:
    if not API_KEY:
        return
    key = request.headers.get("X-API-Key") or request.args.get("api_key")
    if not key or key != API_KEY:
        abort(401, description="Invalid or missing API key")


def _personal_data(data: dict) -> dict:
    return {
        "name": (data.get("name") or "").strip() or None,
        "birthday": data.get("birthday") or None,
        "phone": (data.get("phone") or "").strip() or None,
    }


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": __version__})


@app.route("/analyze", methods=["POST"])
@limiter.limit("30 per minute")
def analyze_endpoint():
    require_api_key()
    data = request.get_json(silent=True)
    if not data or "url" not in data:
        return jsonify({"error": "missing 'url' in JSON body"}), 400

    url = str(data["url"])
    try:
        result = analyze(url)
    except URLValidationError as e:
        kind = "empty_input" if isinstance(e, EmptyInput) else "invalid_url"
        logger.info("Rejected %s input: %r", kind, url)
        return jsonify({"error": kind, "detail": str(e)}), 400

    payload = result.model_dump(mode="json")
    try:
        scan_id = save_scan(url.strip(), result.normalized_url, result.risk_level, result.score, payload)
    except Exception:
        logger.exception("Failed to store analysis of %s", result.normalized_url)
        return jsonify({"error": "storage_failed"}), 500

    return jsonify({"scan_id": scan_id, "url": url.strip(), **payload}), 200


@app.route("/history", methods=["GET"])
@limiter.limit("20 per minute")
def history():
    require_api_key()
    try:
        limit = int(request.args.get("limit", 50))
        page = int(request.args.get("page", 0))
    except ValueError:
        return jsonify({"error": "limit/page must be integer"}), 400
    limit = min(200, max(1, limit))
    offset = max(0, page) * limit
    rows = list_scans(limit=limit, offset=offset)
    return jsonify({"count": len(rows), "rows": rows})


@app.route("/history/<int:scan_id>", methods=["GET"])
@limiter.limit("20 per minute")
def get_history_item(scan_id: int):
    require_api_key()
    item = get_scan(scan_id)
    if not item:
        return jsonify({"error": "not_found"}), 404
    return jsonify(item)


@app.route("/password/generate", methods=["POST"])
def password_generate():
    """Generate a password; personal data only steers regeneration and is not stored."""
    require_api_key()
    data = request.get_json(silent=True) or {}
    try:
        length = int(data.get("length", DEFAULT_PASSWORD_LENGTH))
        password, warnings = generate_for_user(
            length,
            uppercase=bool(data.get("uppercase", True)),
            lowercase=bool(data.get("lowercase", True)),
            numbers=bool(data.get("numbers", True)),
            symbols=bool(data.get("symbols", True)),
            **_personal_data(data),
        )
    except (TypeError, ValueError) as e:
        # PasswordOptionsError is a ValueError too
        detail = str(e) if isinstance(e, PasswordOptionsError) else "length must be an integer"
        return jsonify({"error": "invalid_options", "detail": detail}), 400

    return jsonify({
        "password": password,
        "strength": calculate_strength(password),
        "warnings": warnings,
    }), 200


@app.route("/password/check", methods=["POST"])
def password_check():
    require_api_key()
    data = request.get_json(silent=True)
    if not data or not data.get("password"):
        return jsonify({"error": "missing 'password' in JSON body"}), 400
    password = str(data["password"])
    return jsonify({
        "warnings": validate_against_personal_data(password, **_personal_data(data)),
        "strength": calculate_strength(password),
    }), 200


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5050)), debug=False)
