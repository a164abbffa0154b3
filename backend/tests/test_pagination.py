from fastapi.testclient import TestClient

from jobdetails.config import settings
from jobdetails.main import app
from jobdetails.utils.pagination import Page, SortOrder, build_pageable, generate_pagination_headers, parse_sort

client = TestClient(app)


def test_parse_sort_trailing_direction_applies_to_all_fields():
    orders = parse_sort(['name,id,desc', 'id', ' , '])
    assert orders == (
        SortOrder('name', True),
        SortOrder('id', True),
        SortOrder('id', False),
    )


def test_build_pageable_clamps_size():
    assert build_pageable(0, None, None, default_size=20, max_size=100).size == 20
    assert build_pageable(0, 5000, None, default_size=20, max_size=100).size == 100
    assert build_pageable(-3, 10, None, default_size=20, max_size=100).page == 0


def test_headers_for_empty_store():
    headers = generate_pagination_headers(Page(content=[], total=0, page=0, size=20), '/api/titles')
    assert headers['X-Total-Count'] == '0'
    assert headers['Link'] == (
        '</api/titles?page=0&size=20>; rel="last",'
        '</api/titles?page=0&size=20>; rel="first"'
    )


def test_list_page_and_link_header():
    for i in range(5):
        assert client.post('/api/titles', json={'name': f'n{i}'}).status_code == 201

    r = client.get('/api/titles', params={'page': 1, 'size': 2, 'sort': 'name,desc'})
    assert r.status_code == 200
    assert [t['name'] for t in r.json()] == ['n2', 'n1']
    assert r.headers['X-Total-Count'] == '5'
    assert r.headers['Link'] == (
        '</api/titles?page=2&size=2>; rel="next",'
        '</api/titles?page=0&size=2>; rel="prev",'
        '</api/titles?page=2&size=2>; rel="last",'
        '</api/titles?page=0&size=2>; rel="first"'
    )


def test_list_sorted_ascending_by_default_direction():
    for name in ('b', 'c', 'a'):
        client.post('/api/titles', json={'name': name})
    r = client.get('/api/titles', params={'sort': 'name'})
    assert [t['name'] for t in r.json()] == ['a', 'b', 'c']


def test_list_with_unknown_sort_field():
    r = client.get('/api/titles', params={'sort': 'salary,desc'})
    assert r.status_code == 400
    assert r.headers[f'X-{settings.APP_NAME}-error'] == 'error.sortinvalid'


def test_list_with_invalid_page():
    r = client.get('/api/titles', params={'page': -1})
    assert r.status_code == 400
    assert r.json()['message'] == 'error.validation'
