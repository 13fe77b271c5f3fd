#!/usr/bin/env python3
# This project was developed with assistance from AI tools.
"""Live test suite for the BidReady checklist API.

Exercises every checklist endpoint, the validation views, and RFC 7807 error
bodies against a running server instance. Edits made here are reverted at
the end of the run.

Prerequisites:
  - API server running on localhost:8000 with AUTH_DISABLED=true
  - A ``companies`` row whose id matches DEV_COMPANY_ID (default 1)

Usage:
  ./scripts/live-tests.py                       # full suite
  ./scripts/live-tests.py --section read        # read-only endpoints
  ./scripts/live-tests.py --base-url http://api:8000
"""

import argparse
import asyncio
import sys

import httpx

CHECKLIST = "/api/company/checklist"
HEADERS = {"Origin": "http://localhost:3000"}

# ---------------------------------------------------------------------------
# Test runner
# ---------------------------------------------------------------------------

PASS = 0
FAIL = 0
ERRORS: list[str] = []
SECTION = ""


def section(name: str):
    global SECTION
    SECTION = name
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}\n")


def ok(name: str, passed: bool, detail: str = ""):
    global PASS, FAIL
    if passed:
        PASS += 1
        print(f"  PASS  {name}")
    else:
        FAIL += 1
        msg = f"[{SECTION}] {name}: {detail}" if detail else f"[{SECTION}] {name}"
        ERRORS.append(msg)
        print(f"  FAIL  {name} -- {detail}")


def is_problem(body: dict, status: int) -> bool:
    return body.get("status") == status and all(k in body for k in ("type", "title", "detail"))


# ---------------------------------------------------------------------------
# 1. Health
# ---------------------------------------------------------------------------

async def test_health(c: httpx.AsyncClient):
    section("Health")

    r = await c.get("/health/")
    ok("GET /health/ returns 200", r.status_code == 200)
    data = r.json()
    ok("contains API service", any(s.get("name") == "API" for s in data))
    ok("database is healthy",
       any(s.get("name") == "Database" and s.get("status") == "healthy" for s in data))


# ---------------------------------------------------------------------------
# 2. Catalog and read views
# ---------------------------------------------------------------------------

async def test_read_views(c: httpx.AsyncClient):
    section("Checklist read views")

    r = await c.get(f"{CHECKLIST}/catalog")
    ok("GET catalog returns 200", r.status_code == 200)
    catalog = r.json()
    ok("catalog has 67 items", catalog.get("total_items") == 67,
       f"total_items={catalog.get('total_items')}")
    ok("catalog ordered State/County/City/All",
       [g["category"] for g in catalog.get("categories", [])] == ["State", "County", "City", "All"])

    r = await c.get(CHECKLIST)
    ok("GET checklist returns 200", r.status_code == 200)
    ok("checklist has 120 item fields", len(r.json().get("fields", {})) == 120)

    for view in ("summary", "progress", "critical"):
        r = await c.get(f"{CHECKLIST}/{view}")
        ok(f"GET {view} returns 200", r.status_code == 200, f"status={r.status_code}")

    r = await c.get(f"{CHECKLIST}/validation", params={"jurisdictions": "State"})
    body = r.json()
    ok("single-jurisdiction validation", body.get("jurisdictions") == ["State"])
    ok("percentage within 0-100", 0 <= body.get("completion_percentage", -1) <= 100)

    r = await c.get(f"{CHECKLIST}/gate",
                    params=[("jurisdictions", "County"), ("jurisdictions", "City")])
    body = r.json()
    ok("gate reports may_submit", "may_submit" in body)
    ok("gate reports critical items", "critical_items_missing" in body)


# ---------------------------------------------------------------------------
# 3. Edits (reverted afterwards)
# ---------------------------------------------------------------------------

async def test_edits(c: httpx.AsyncClient):
    section("Checklist edits")

    original = (await c.get(CHECKLIST)).json()
    fields = original["fields"]

    r = await c.put(CHECKLIST, json={"field": "business_license_state",
                                      "value": not fields["business_license_state"]})
    ok("PUT boolean returns 200", r.status_code == 200)
    ok("PUT flips the flag",
       r.json()["fields"]["business_license_state"] is not fields["business_license_state"])
    ok("PUT records the editor", r.json().get("last_updated_by") == "dev-user")

    r = await c.put(CHECKLIST, json={"field": "federal_ein_value_state", "value": "12-3456789"})
    ok("PUT text returns 200", r.status_code == 200)

    r = await c.patch(CHECKLIST, json={"updates": {"w9_form_city": True,
                                                    "eeo_certification_city": "yes"},
                                       "notes": "live-tests"})
    ok("PATCH returns 200", r.status_code == 200)
    ok("PATCH applies booleans", r.json()["fields"]["w9_form_city"] is True)
    ok("PATCH skips non-booleans",
       r.json()["fields"]["eeo_certification_city"] is fields["eeo_certification_city"])

    # Restore
    booleans = {k: v for k, v in fields.items() if isinstance(v, bool)}
    r = await c.patch(CHECKLIST, json={"updates": booleans, "notes": original.get("notes")})
    await c.put(CHECKLIST, json={"field": "federal_ein_value_state",
                                  "value": fields["federal_ein_value_state"]})
    ok("checklist restored", r.status_code == 200)


# ---------------------------------------------------------------------------
# 4. Error handling
# ---------------------------------------------------------------------------

async def test_error_handling(c: httpx.AsyncClient):
    section("Error Handling (RFC 7807)")

    r = await c.put(CHECKLIST, json={"field": "bogus", "value": True})
    ok("unknown field is 422", r.status_code == 422)
    ok("422 is Problem Details", is_problem(r.json(), 422))

    r = await c.put(CHECKLIST, json={"field": "business_license_state", "value": "yes"})
    ok("wrong value type is 422", r.status_code == 422)

    r = await c.get(f"{CHECKLIST}/validation", params={"jurisdictions": "Federal"})
    ok("unknown jurisdiction is 422", r.status_code == 422)

    r = await c.delete(CHECKLIST)
    ok("405 for DELETE", r.status_code == 405)

    r = await c.get("/api/nonexistent")
    ok("non-existent route returns 404", r.status_code == 404)
    ok("404 is Problem Details", is_problem(r.json(), 404))


async def test_openapi(c: httpx.AsyncClient):
    section("OpenAPI Specification")

    r = await c.get("/openapi.json")
    ok("GET /openapi.json returns 200", r.status_code == 200)
    paths = r.json().get("paths", {})
    ok("checklist paths published", CHECKLIST in paths and f"{CHECKLIST}/gate" in paths)


async def main():
    parser = argparse.ArgumentParser(description="Live test suite for the BidReady checklist API")
    parser.add_argument("--base-url", default="http://localhost:8000")
    parser.add_argument("--section", choices=["read", "write", "all"], default="all",
                        help="Which sections to run")
    args = parser.parse_args()

    print("=" * 60)
    print("  LIVE TEST SUITE -- BidReady Checklist API")
    print("=" * 60)

    async with httpx.AsyncClient(base_url=args.base_url, headers=HEADERS, timeout=15) as c:

        # Pre-flight: server up and dev company present
        try:
            r = await c.get(CHECKLIST)
        except httpx.ConnectError:
            print(f"\n  Cannot connect to server at {args.base_url} -- is it running?")
            sys.exit(2)
        if r.status_code == 404:
            print("\n  No company for the dev user -- insert a companies row with id=DEV_COMPANY_ID")
            sys.exit(2)
        if r.status_code != 200:
            print(f"\n  Server returned {r.status_code} on {CHECKLIST} -- is AUTH_DISABLED=true?")
            sys.exit(2)

        await test_health(c)
        if args.section in ("read", "all"):
            await test_read_views(c)
            await test_openapi(c)
        if args.section in ("write", "all"):
            await test_edits(c)
            await test_error_handling(c)

    print(f"\n{'=' * 60}")
    print(f"  RESULTS: {PASS} passed, {FAIL} failed")
    print(f"{'=' * 60}")

    if ERRORS:
        print("\nFailures:")
        for e in ERRORS:
            print(f"  - {e}")

    sys.exit(0 if FAIL == 0 else 1)


if __name__ == "__main__":
    asyncio.run(main())
