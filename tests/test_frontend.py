import pytest
import requests

from linksentry import frontend
from linksentry.app import analyze


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload


@pytest.fixture
def client():
    frontend.app.config['TESTING'] = True
    with frontend.app.test_client() as c:
        yield c


def test_progress_offset():
    assert frontend.progress_offset(0) == pytest.approx(frontend.PROGRESS_CIRCUMFERENCE)
    assert frontend.progress_offset(100) == pytest.approx(0)
    assert frontend.progress_offset(50) == pytest.approx(frontend.PROGRESS_CIRCUMFERENCE / 2)


def test_build_view():
    payload = analyze('http://192.168.1.1/secure-login@evil.com').model_dump(mode='json')
    view = frontend.build_view(payload)
    assert view['badge_class'] == 'badge-critical'
    assert view['score'] == 85
    assert [i['icon'] for i in view['indicators']] == [
        'alert-triangle', 'x-octagon', 'alert-triangle', 'x-octagon',
    ]


def test_index_renders(client):
    rv = client.get('/')
    assert rv.status_code == 200
    assert b'progressCircle' in rv.data


def test_submit_forwards_to_backend(client, monkeypatch):
    seen = {}

    def fake_post(url, json, timeout):
        seen['url'] = url
        seen['body'] = json
        return FakeResponse(200, analyze(json['url']).model_dump(mode='json'))

    monkeypatch.setattr(frontend.requests, 'post', fake_post)
    rv = client.post('/submit', json={'url': 'https://example.com'})
    assert rv.status_code == 200
    assert seen['url'].endswith('/analyze')
    assert seen['body'] == {'url': 'https://example.com'}
    view = rv.get_json()
    assert view['risk_label'] == 'Safe'
    assert len(view['indicators']) == 3


def test_submit_passes_through_validation_errors(client, monkeypatch):
    monkeypatch.setattr(frontend.requests, 'post',
                        lambda url, json, timeout: FakeResponse(400, {'error': 'invalid_url'}))
    rv = client.post('/submit', json={'url': 'not a url'})
    assert rv.status_code == 400
    assert rv.get_json()['error'] == 'invalid_url'


def test_submit_backend_down(client, monkeypatch):
    def boom(url, json, timeout):
        raise requests.ConnectionError('refused')

    monkeypatch.setattr(frontend.requests, 'post', boom)
    rv = client.post('/submit', json={'url': 'https://example.com'})
    assert rv.status_code == 502


def test_submit_requires_url(client):
    assert client.post('/submit', json={}).status_code == 400
