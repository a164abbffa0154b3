from fastapi.testclient import TestClient

from jobdetails.config import settings
from jobdetails.main import app

client = TestClient(app)


def test_company_crud_flow():
    created = client.post('/api/companies', json={'name': 'Acme'})
    assert created.status_code == 201
    company_id = created.json()['id']
    assert created.headers['Location'] == f'/api/companies/{company_id}'
    assert created.headers[f'X-{settings.APP_NAME}-alert'].startswith('A new company is created')

    got = client.get(f'/api/companies/{company_id}')
    assert got.status_code == 200
    assert got.json()['name'] == 'Acme'

    updated = client.put('/api/companies', json={'id': company_id, 'name': 'Acme Ltd'})
    assert updated.status_code == 200
    assert client.get(f'/api/companies/{company_id}').json()['name'] == 'Acme Ltd'

    listed = client.get('/api/companies')
    assert [c['id'] for c in listed.json()] == [company_id]

    deleted = client.delete(f'/api/companies/{company_id}')
    assert deleted.status_code == 200
    assert client.get(f'/api/companies/{company_id}').status_code == 404
    assert client.get('/api/companies').headers['X-Total-Count'] == '0'


def test_company_create_with_id_rejected():
    r = client.post('/api/companies', json={'id': 7, 'name': 'Acme'})
    assert r.status_code == 400
    assert r.headers[f'X-{settings.APP_NAME}-params'] == 'company'


def test_titles_and_companies_are_separate_stores():
    client.post('/api/companies', json={'name': 'Acme'})
    assert client.get('/api/titles').json() == []
