#!/usr/bin/env python3
"""
Seed script to populate the database with sample people via API calls.
Make sure the API is running on http://localhost:8000 before running this script.
"""

import argparse
import asyncio
import sys

import httpx


API_BASE_URL = "http://localhost:8000"

PEOPLE_SAMPLES = [
    {"nickname": "josé", "name": "José Roberto", "birth_date": "2000-10-01", "stack": ["C#", "Node", "Oracle"]},
    {"nickname": "ana", "name": "Ana Barbosa", "birth_date": "1985-09-23", "stack": None},
    {"nickname": "joao33", "name": "Joao Silva", "birth_date": "1992-02-29", "stack": ["Java", "Python"]},
    {"nickname": "mari", "name": "Mariana Costa", "birth_date": "1999-12-31", "stack": ["Go", "Postgres", "Go"]},
    {"nickname": "beto", "name": "Roberto Dias", "birth_date": "1978-06-15", "stack": []},
]

# Payloads the API must reject with 422
INVALID_SAMPLES = [
    {"nickname": "ana", "name": "Ana Duplicada", "birth_date": "1990-01-01", "stack": None},
    {"nickname": "bad-date", "name": "Bad Date", "birth_date": "1990-02-30", "stack": None},
    {"nickname": "x" * 33, "name": "Too Long", "birth_date": "1990-01-01", "stack": None},
    {"nickname": "empty-tag", "name": "Empty Tag", "birth_date": "1990-01-01", "stack": [""]},
]


async def seed(base_url: str, search_term: str) -> int:
    failures = 0
    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        for sample in PEOPLE_SAMPLES:
            r = await client.post("/pessoas", json=sample)
            if r.status_code == 201:
                print(f"created {sample['nickname']!r} -> {r.headers.get('Location')}")
            elif r.status_code == 422:
                print(f"skipped {sample['nickname']!r} (already exists)")
            else:
                failures += 1
                print(f"FAILED {sample['nickname']!r}: {r.status_code} {r.text[:200]}")

        for sample in INVALID_SAMPLES:
            r = await client.post("/pessoas", json=sample)
            status = "ok" if r.status_code == 422 else "UNEXPECTED"
            if r.status_code != 422:
                failures += 1
            print(f"invalid {sample['nickname'][:12]!r}: {r.status_code} ({status})")

        r = await client.get("/pessoas", params={"t": search_term})
        r.raise_for_status()
        print(f"search {search_term!r}: {[p['nickname'] for p in r.json()]}")

        r = await client.get("/contagem-pessoas")
        r.raise_for_status()
        print(f"count: {r.text}")
    return failures


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--base-url", default=API_BASE_URL)
    parser.add_argument("--term", default="java")
    args = parser.parse_args()
    failures = asyncio.run(seed(args.base_url, args.term))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
