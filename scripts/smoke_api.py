#!/usr/bin/env python3
"""Smoke test for a running lookup API.

Run the server first:
  cd src && python main.py

Then run:
  python scripts/smoke_api.py
"""

import json
import sys

import httpx

BASE_URL = "http://localhost:8000"


def check_endpoint(name: str, method: str, path: str, data: dict | None = None, expect: int = 200) -> bool:
    """Call an API endpoint and print the result."""
    print(f"\n{'='*60}")
    print(f"CHECK: {name}")
    print(f"{'='*60}")

    url = f"{BASE_URL}{path}"
    print(f"{method} {path}")
    if data:
        print(f"Request: {json.dumps(data, ensure_ascii=False)}")

    try:
        with httpx.Client(timeout=30) as client:
            if method == "GET":
                response = client.get(url)
            else:
                response = client.post(url, json=data)
    except httpx.ConnectError:
        print("Could not connect to server. Is it running?")
        return False

    print(f"\nStatus: {response.status_code} (expected {expect})")
    print(f"Response:\n{json.dumps(response.json(), ensure_ascii=False, indent=2)}")
    return response.status_code == expect


def main() -> int:
    print("="*60)
    print("LOOKUP API SMOKE CHECK")
    print("="*60)

    if not check_endpoint("Health Check", "GET", "/"):
        print("\nServer not running. Start with: cd src && python main.py")
        return 1

    results = [
        check_endpoint("Dictionaries", "GET", "/dictionaries"),
        check_endpoint(
            "Pali - Inflected and Compound Words",
            "POST", "/lookup",
            {"words": ["buddhassa", "dhammavinaya", "appamādena"], "from": "pli", "to": "en"},
        ),
        check_endpoint(
            "Pali - Quotation and Enclitic",
            "POST", "/lookup",
            {"words": ["gacchāmī’ti", "sopi"], "from": "pli", "to": "en"},
        ),
        check_endpoint(
            "Pali - Fallback to English",
            "POST", "/lookup",
            {"words": ["dhamma"], "from": "pli", "to": "nl"},
        ),
        check_endpoint(
            "Chinese - Substring Scan",
            "POST", "/lookup",
            {"words": ["如是我聞", "一時佛住"], "from": "lzh", "to": "en"},
        ),
        check_endpoint(
            "Missing Dictionary",
            "POST", "/lookup",
            {"words": ["dhamma"], "from": "pli", "to": "xx"},
            expect=404,
        ),
    ]

    print("\n" + "="*60)
    print(f"SMOKE CHECK COMPLETE: {sum(results)}/{len(results)} passed")
    print("="*60)
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
