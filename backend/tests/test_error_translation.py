from fastapi.testclient import TestClient
from sqlalchemy.orm.exc import StaleDataError

from jobdetails.main import app
from jobdetails.services import TitleService

client = TestClient(app, raise_server_exceptions=False)


def test_malformed_json_is_a_validation_error():
    r = client.post('/api/titles', content=b'{', headers={'Content-Type': 'application/json'})
    assert r.status_code == 400
    assert r.json()['message'] == 'error.validation'
    assert client.get('/api/titles').json() == []


def test_unexpected_error_becomes_500(monkeypatch):
    def boom(self, entity_id):
        raise RuntimeError('database went away')

    monkeypatch.setattr(TitleService, 'find_one', boom)
    r = client.get('/api/titles/1', headers={'X-Request-ID': 'req-500'})
    assert r.status_code == 500
    assert r.json() == {'message': 'error.internalServerError'}
    assert r.headers['X-Request-ID'] == 'req-500'


def test_stale_data_becomes_409(monkeypatch):
    def stale(self, entity):
        raise StaleDataError('row was updated concurrently')

    monkeypatch.setattr(TitleService, 'save', stale)
    r = client.put('/api/titles', json={'id': 1, 'name': 'x'})
    assert r.status_code == 409
    assert r.json() == {'message': 'error.concurrencyFailure'}
