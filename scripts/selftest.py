"""
API Self-Test Script
====================
Calls every endpoint of a running standards API and reports pass/fail.

Usage:
    python scripts/selftest.py                          # http://localhost:<API_PORT>
    python scripts/selftest.py --url http://host:3000

Exits 0 when every check passes, 1 otherwise.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional

import httpx

from standards_automation.config import get_settings

HR2 = "=" * 60


@dataclass
class CheckResult:
    endpoint: str
    status: int
    success: bool
    message: str


def _check_health(data: dict[str, Any]) -> tuple[bool, str]:
    loaded = data.get("recordsLoaded", 0)
    if loaded > 0:
        return True, f"OK - {loaded} records loaded"
    return False, f"FAIL - Expected recordsLoaded > 0, got {loaded}"


def _check_search(data: dict[str, Any]) -> tuple[bool, str]:
    results = data.get("results", [])
    if results:
        return True, f"OK - {len(results)} results found"
    return False, f"FAIL - Expected results.length > 0, got {len(results)}"


def _check_checklist(data: dict[str, Any]) -> tuple[bool, str]:
    checklist = data.get("checklist", [])
    if checklist:
        return True, f"OK - {len(checklist)} checklist items"
    return False, f"FAIL - Expected checklist.length > 0, got {len(checklist)}"


def _check_reference(data: dict[str, Any]) -> tuple[bool, str]:
    if isinstance(data, dict) and "error" not in data:
        return True, f"OK - Reference found: {data.get('reference', 'N/A')}"
    return False, "FAIL - Reference not found or error returned"


CHECKS: list[tuple[str, str, str, Optional[dict[str, Any]], Callable]] = [
    ("GET /health", "GET", "/health", None, _check_health),
    (
        "POST /standards/searchRequirements",
        "POST",
        "/standards/searchRequirements",
        {"standard": "HCIS_SEC", "query": "security", "limit": 3},
        _check_search,
    ),
    (
        "POST /standards/generateChecklist",
        "POST",
        "/standards/generateChecklist",
        {"standards": ["HCIS_SEC", "SBC_801", "SASO_FIRE_TR"]},
        _check_checklist,
    ),
    (
        "POST /standards/getReference",
        "POST",
        "/standards/getReference",
        {"reference": "HCIS SEC-01 4.4.1"},
        _check_reference,
    ),
]


def run_check(
    client: httpx.Client,
    name: str,
    method: str,
    path: str,
    body: Optional[dict[str, Any]],
    check: Callable[[dict[str, Any]], tuple[bool, str]],
) -> CheckResult:
    try:
        response = client.request(method, path, json=body)
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        return CheckResult(name, 0, False, f"ERROR - {e}")

    if response.status_code != 200:
        return CheckResult(name, response.status_code, False, f"FAIL - Status {response.status_code}")

    success, message = check(data)
    return CheckResult(name, response.status_code, success, message)


def main(argv: Optional[list[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Self-test a running standards API")
    parser.add_argument(
        "--url",
        default=f"http://localhost:{settings.api_port}",
        help="Base URL of the API (default: localhost on the configured port)",
    )
    args = parser.parse_args(argv)

    print(HR2)
    print("  Standards API - Self Test")
    print(f"  Testing API at: {args.url}")
    print(HR2)
    print()

    results: list[CheckResult] = []
    with httpx.Client(base_url=args.url, timeout=10.0) as client:
        for number, (name, method, path, body, check) in enumerate(CHECKS, start=1):
            print(f"Test {number}: {name}")
            result = run_check(client, name, method, path, body, check)
            results.append(result)
            if body is not None:
                print(f"  Request: {body}")
            print(f"  Status: {result.status}")
            print(f"  Result: {result.message}")
            print()

    print(HR2)
    print("  Test Summary")
    print(HR2)
    for result in results:
        icon = "✓" if result.success else "✗"
        print(f"{icon} {result.endpoint}: {result.message}")

    passed = sum(1 for r in results if r.success)
    print()
    print(f"Results: {passed}/{len(results)} tests passed")

    return 0 if passed == len(results) else 1


if __name__ == "__main__":
    sys.exit(main())
