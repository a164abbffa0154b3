"""CLI script to seed entities from a JSON file into the backend DB.
Usage: python scripts/import_entities.py FILE [--dry-run]

The file holds one list of records per entity, e.g.
{"titles": [{"name": "Engineer"}], "companies": [{"name": "Acme"}]}
"""
import sys
import json
import argparse
import pathlib
# Ensure `backend/` is on sys.path so `jobdetails` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from sqlmodel import Session
from jobdetails.database import engine, create_db_and_tables
from jobdetails import services


def main(path: pathlib.Path, dry_run: bool = False):
    """Load `path` and import every entity list it contains.

    Results are printed to stdout for a quick CLI feedback loop.
    """
    if not path.exists():
        print(f'Seed file not found at {path}')
        return 1
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, dict):
        print('Seed file must contain a JSON object keyed by entity')
        return 1
    create_db_and_tables()
    with Session(engine) as session:
        svc = services.EntityImportService(session)
        total_created = 0
        for entity, records in data.items():
            if entity not in services.ENTITY_TYPES:
                print(f'Skipping unknown entity {entity!r}')
                continue
            result = svc.import_records(entity, records, dry_run=dry_run)
            total_created += result['created']
            print(f"Imported {entity}: created {result['created']}, errors {len(result['errors'])}")
            for err in result['errors']:
                print(f"  #{err['index']}: {err['error']}")
        print(f'Total created: {total_created}' + (' (dry run)' if dry_run else ''))
    return 0

if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('file', type=pathlib.Path, help='JSON seed file')
    parser.add_argument('--dry-run', action='store_true', help='Validate without writing')
    args = parser.parse_args()
    sys.exit(main(args.file, dry_run=args.dry_run))
