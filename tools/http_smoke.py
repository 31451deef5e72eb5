"""
Smoke-check a running gateway: hit /health and every documented example.

    python tools/http_smoke.py [base_url]
"""
import sys

import requests

from fintra.config import catalog

DEFAULT_BASE_URL = "http://127.0.0.1:3000"


def run_smoke(base_url: str = DEFAULT_BASE_URL, timeout: float = 30.0) -> int:
    paths = ["/health"] + list(catalog.EXAMPLE_PATHS.values())
    failures = 0
    for path in paths:
        url = base_url.rstrip("/") + path
        try:
            r = requests.get(url, timeout=timeout)
        except requests.RequestException as e:
            print(f"ERR  {path}: {e}")
            failures += 1
            continue
        print(f"{r.status_code}  {path}")
        if r.status_code >= 500:
            try:
                print(f"     {r.json()}")
            except ValueError:
                print(f"     {r.text[:200]}")
            failures += 1
    return 1 if failures else 0


def main():
    base_url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_BASE_URL
    sys.exit(run_smoke(base_url))


if __name__ == "__main__":
    main()
