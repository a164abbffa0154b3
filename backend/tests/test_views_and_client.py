import httpx
import pytest
from fastapi.testclient import TestClient

from jobdetails.client import EntityClient, build_client
from jobdetails.main import app

client = TestClient(app)


def test_company_detail_page_renders_fields():
    company_id = client.post('/api/companies', json={'name': 'Acme <Corp>'}).json()['id']
    r = client.get(f'/companies/{company_id}')
    assert r.status_code == 200
    assert r.headers['content-type'].startswith('text/html')
    assert 'Acme &lt;Corp&gt;' in r.text
    assert 'window.history.back()' in r.text


def test_detail_page_not_found():
    r = client.get('/titles/999')
    assert r.status_code == 404
    assert 'not found' in r.text


def test_list_page_links_to_details():
    title_id = client.post('/api/titles', json={'name': 'Engineer'}).json()['id']
    r = client.get('/titles')
    assert r.status_code == 200
    assert f'href="/titles/{title_id}"' in r.text
    assert 'Engineer' in r.text


def test_home_links_entities():
    r = client.get('/')
    assert r.status_code == 200
    assert 'href="/titles"' in r.text
    assert 'href="/companies"' in r.text


def test_entity_client_round_trip():
    companies = EntityClient(client, '/api/companies/')
    created = companies.create({'name': 'Acme'})
    assert companies.find(created['id']) == created

    updated = companies.update({'id': created['id'], 'name': 'Globex'})
    assert updated['name'] == 'Globex'

    companies.create({'name': 'Initech'})
    items, total = companies.query(page=0, size=1, sort=['name,asc'])
    assert total == 2
    assert [c['name'] for c in items] == ['Globex']

    companies.delete(created['id'])
    with pytest.raises(httpx.HTTPStatusError) as exc:
        companies.find(created['id'])
    assert exc.value.response.status_code == 404


def test_entity_client_create_with_id_raises():
    titles = EntityClient(client, '/api/titles')
    with pytest.raises(httpx.HTTPStatusError) as exc:
        titles.create({'id': 5, 'name': 'x'})
    assert exc.value.response.status_code == 400


def test_build_client_defaults():
    with build_client('http://example.invalid', timeout=3) as http:
        assert http.timeout.read == 3
        assert http.headers['Accept'] == 'application/json'
