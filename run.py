#!/usr/bin/env python3

"""
Smoke test runner for the Revenue Forecast API against a running server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict

import httpx

BASE_URL = os.getenv("FORECAST_BASE_URL", "http://localhost:4323/api/v1")
HEADERS = {"Content-Type": "application/json"}
NOW = "2025-12-15T12:00:00"


@dataclass(frozen=True)
class Case:
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200
    section: str = ""


def paid(amount: float, day: str) -> Dict[str, Any]:
    return {"amount": amount, "status": "PAID", "paid_date": f"{day}T10:00:00"}


YEAR_INVOICES = [
    paid(2800, "2025-03-04"),
    paid(3200, "2025-04-11"),
    paid(2950, "2025-05-09"),
    paid(3600, "2025-06-13"),
    paid(3400, "2025-07-18"),
    paid(3800, "2025-08-22"),
    paid(4100, "2025-09-05"),
    {"amount": 900, "status": "SENT", "paid_date": None},
]


CASES: list[Case] = [
    # ── Health ────────────────────────────────────────────
    Case("health", "GET", "/health", section="Health"),

    # ── Regression ────────────────────────────────────────
    Case("sample series", "GET", "/regression/sample", section="Regression"),
    Case("exact quadratic", "POST", "/regression/fit", section="Regression", body={
        "series": [{"x": 0, "y": 1}, {"x": 1, "y": 4}, {"x": 2, "y": 9}, {"x": 3, "y": 16}],
        "degree": 2, "count": 2,
    }),
    Case("degree clamped", "POST", "/regression/fit", section="Regression", body={
        "series": [{"x": 0, "y": 10}, {"x": 1, "y": 20}], "degree": 3, "count": 1,
    }),
    Case("identical x", "POST", "/regression/fit", section="Regression", body={
        "series": [{"x": 2, "y": 10}, {"x": 2, "y": 20}, {"x": 2, "y": 30}], "degree": 2,
    }, expect=422),
    Case("empty series", "POST", "/regression/fit", section="Regression",
         body={"series": []}, expect=422),

    # ── Analytics ─────────────────────────────────────────
    Case("year trends", "POST", "/analytics/revenue", section="Analytics",
         body={"invoices": YEAR_INVOICES, "period": "year", "now": NOW}),
    Case("quarter trends", "POST", "/analytics/revenue", section="Analytics",
         body={"invoices": YEAR_INVOICES, "period": "quarter", "now": NOW}),
    Case("no invoices", "POST", "/analytics/revenue", section="Analytics",
         body={"invoices": [], "period": "trailing", "now": NOW}),
    Case("year timeline", "POST", "/analytics/revenue/timeline", section="Analytics",
         body={"invoices": YEAR_INVOICES, "period": "year", "now": NOW}),

    # ── Validation ────────────────────────────────────────
    Case("negative count", "POST", "/regression/fit", section="Validation",
         body={"series": [{"x": 0, "y": 1}], "count": -1}, expect=422),
    Case("unknown period", "POST", "/analytics/revenue", section="Validation",
         body={"invoices": [], "period": "decade"}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    try:
        r = await client.request(case.method, case.path, json=case.body or None)
    except httpx.TransportError as exc:
        return False, f"transport error: {exc}", None
    try:
        body: Any = r.json()
    except ValueError:
        body = r.text
    if r.status_code == case.expect:
        return True, "", body
    return False, f"{r.status_code} {r.reason_phrase}: {body}", body


async def main():
    parser = argparse.ArgumentParser(description="Run API smoke cases")
    parser.add_argument("--section", help="only run cases from this section name")
    args = parser.parse_args()
    selected = [c for c in CASES if not args.section or c.section == args.section]
    if not selected:
        print("no matching cases (check --section)")
        sys.exit(1)

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=30) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n── {current_section} {'─' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            pretty = json.dumps(body, indent=2) if body is not None else "<no response>"

            if ok:
                passed += 1
                print(f"  ✓ PASS  {case.method} {case.path} — {case.label}")
                print(f"         response:\n{pretty}")
            else:
                failed += 1
                print(f"  ✗ FAIL  {case.method} {case.path} — {case.label} (expected {case.expect})")
                if detail:
                    print(f"         {detail}")

    total = passed + failed
    print(f"\n{'━' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"{'━' * 43}\n")
    sys.exit(0 if failed == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
