"""Run a quick smoke test against the app in-process.

Creates, reads and deletes one title through `EntityClient` over
FastAPI's TestClient and prints each step.
"""

import sys
import os

# Ensure backend folder is on sys.path so `jobdetails` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from jobdetails.main import app
from jobdetails.client import EntityClient


def run():
    with TestClient(app) as http:
        print('HEALTH:', http.get('/health').json())
        titles = EntityClient(http, '/api/titles')
        created = titles.create({'name': 'Smoke test'})
        print('CREATED:', created)
        print('FOUND:', titles.find(created['id']))
        items, total = titles.query(sort=['id,desc'])
        print('TOTAL:', total)
        titles.delete(created['id'])
        print('DELETED:', created['id'])


if __name__ == '__main__':
    run()
