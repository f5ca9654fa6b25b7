#!/usr/bin/env python3
"""
Booking and extension flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_book_and_extend.py --guest GuestA --unit 1 --check-in 2026-11-01 --nights 5 --extra-nights 2
    python scripts/flow_book_and_extend.py --guest GuestA --unit 1 --check-in 2026-11-01 --nights 5 --blocker GuestC

Flow:
    1. Create booking
    2. (optional) Create a blocking booking starting at the first booking's checkout
    3. Extend the first booking
    4. Fetch the booking to show its final state
"""

import argparse
import json
import sys
from datetime import date, timedelta

import httpx

BASE_URL = "http://localhost:8000"
API_PREFIX = "/api/v1"


def api_request(base_url: str, method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make an API request and return status plus decoded body."""
    url = f"{base_url}{API_PREFIX}{endpoint}"

    if method == "GET":
        response = httpx.get(url, timeout=10.0)
    elif method == "POST":
        response = httpx.post(url, json=data or {}, timeout=10.0)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict) -> bool:
    """Print result; return False for error responses."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    print(json.dumps(result["data"], indent=2))
    return True


def main():
    parser = argparse.ArgumentParser(description="Create a booking and extend it")
    parser.add_argument("--base-url", default=BASE_URL, help="API server URL")
    parser.add_argument("--guest", required=True, help="Guest name")
    parser.add_argument("--unit", required=True, help="Unit ID")
    parser.add_argument("--check-in", required=True, help="Check-in date (YYYY-MM-DD)")
    parser.add_argument("--nights", type=int, default=5, help="Number of nights")
    parser.add_argument("--extra-nights", default="1", help="Nights to add (sent as given)")
    parser.add_argument("--blocker", help="Guest name for a booking that starts at the first checkout")
    args = parser.parse_args()

    # Step 1: Create booking
    print_step(1, "Create booking")
    booking_result = api_request(args.base_url, "POST", "/booking", {
        "guestName": args.guest,
        "unitID": args.unit,
        "checkInDate": args.check_in,
        "numberOfNights": args.nights,
    })
    if not print_result(booking_result):
        sys.exit(1)
    booking_id = booking_result["data"]["id"]

    # Step 2: Optional blocker right after the first stay
    if args.blocker:
        print_step(2, "Create blocking booking")
        blocker_check_in = date.fromisoformat(args.check_in) + timedelta(days=args.nights)
        blocker_result = api_request(args.base_url, "POST", "/booking", {
            "guestName": args.blocker,
            "unitID": args.unit,
            "checkInDate": blocker_check_in.isoformat(),
            "numberOfNights": 2,
        })
        if not print_result(blocker_result):
            sys.exit(1)

    # Step 3: Extend
    print_step(3, f"Extend booking {booking_id}")
    extend_result = api_request(args.base_url, "POST", f"/booking/{booking_id}/extend", {
        "extraNights": args.extra_nights,
    })
    extended = print_result(extend_result)

    # Step 4: Final state
    print_step(4, "Fetch booking")
    print_result(api_request(args.base_url, "GET", f"/booking/{booking_id}"))

    print("\n" + "="*60)
    print("FLOW COMPLETE" if extended else "FLOW COMPLETE (extension rejected)")
    print("="*60)


if __name__ == "__main__":
    main()
