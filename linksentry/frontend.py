"""Presentation app: forwards URLs to the LinkSentry API and shapes the result for display.

Run: python -m linksentry.frontend
"""

import logging
import math
import os

import requests
from flask import Flask, render_template, request, jsonify

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("frontend")

app = Flask(__name__, template_folder='templates')

BACKEND_URL = os.getenv('BACKEND_URL', 'http://127.0.0.1:5050')
BACKEND_TIMEOUT = float(os.getenv('LINKSENTRY_BACKEND_TIMEOUT', '15'))

# score ring drawn as an SVG circle with r=54
PROGRESS_RADIUS = 54
PROGRESS_CIRCUMFERENCE = 2 * math.pi * PROGRESS_RADIUS

BADGE_CLASSES = {
    'safe': 'badge-safe',
    'low': 'badge-low',
    'medium': 'badge-medium',
    'high': 'badge-high',
    'critical': 'badge-critical',
}

INDICATOR_ICONS = {
    'safe': 'check-circle',
    'warning': 'alert-triangle',
    'danger': 'x-octagon',
}


def progress_offset(score: float) -> float:
    """Stroke offset for the score ring: full circle at 0, empty at 100."""
    return PROGRESS_CIRCUMFERENCE * (1 - score / 100)


def build_view(result: dict) -> dict:
    score = result.get('score', 0)
    return {
        'url': result.get('normalized_url'),
        'score': score,
        'risk_level': result.get('risk_level'),
        'risk_label': result.get('risk_label'),
        'badge_class': BADGE_CLASSES.get(result.get('risk_level'), 'badge-safe'),
        'recommendation': result.get('recommendation'),
        'progress': {
            'circumference': round(PROGRESS_CIRCUMFERENCE, 2),
            'offset': round(progress_offset(score), 2),
        },
        'indicators': [
            {
                'icon': INDICATOR_ICONS.get(i.get('category'), 'info'),
                'category': i.get('category'),
                'title': i.get('title'),
                'description': i.get('description'),
            }
            for i in result.get('indicators', [])
        ],
    }


@app.route('/', methods=['GET'])
def index():
    return render_template('index.html')


@app.route('/submit', methods=['POST'])
def submit():
    data = request.form or request.get_json(silent=True) or {}
    url = (data.get('url') or '').strip()
    if not url:
        return jsonify({'error': 'Please enter a URL to analyze'}), 400

    try:
        r = requests.post(f'{BACKEND_URL}/analyze', json={'url': url}, timeout=BACKEND_TIMEOUT)
        payload = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("backend analyze failed: %s", e)
        return jsonify({'error': f'backend analyze failed: {e}'}), 502

    if r.status_code == 400:
        return jsonify(payload), 400
    if r.status_code != 200:
        return jsonify({'error': 'backend error', 'status': r.status_code, 'detail': payload}), 502

    return jsonify(build_view(payload))


if __name__ == '__main__':
    port = int(os.getenv('PORT', '8080'))
    app.run(host='0.0.0.0', port=port)
