#!/usr/bin/env python3
"""
End-to-end demo script for the SECOP Relay.

Prerequisites:
    1. Relay running: python -m app.run
    2. SECOP_BASE_URL and OPENAI_API_KEY set in .env

Usage:
    python scripts/e2e_demo.py

    # Query a specific publication date:
    python scripts/e2e_demo.py --fecha 2025-04-18

    # Skip the (slow, billed) AI analysis:
    python scripts/e2e_demo.py --no-ai

    # Output raw JSON:
    python scripts/e2e_demo.py --json
"""

import argparse
import json
import sys
from typing import Optional

import httpx

# Configuration
API_BASE = "http://localhost:8080"
ANALYSIS_TIMEOUT = 120  # seconds


def check_health(client: httpx.Client) -> bool:
    """Check if API is healthy."""
    try:
        resp = client.get(f"{API_BASE}/health")
        return resp.status_code == 200
    except httpx.RequestError:
        return False


def get_endpoint(client: httpx.Client, path: str, fecha: Optional[str] = None) -> dict:
    """Call one of the SECOP endpoints."""
    params = {"fecha": fecha} if fecha else {}
    resp = client.get(f"{API_BASE}{path}", params=params)
    resp.raise_for_status()
    return resp.json()


def print_records(data: dict, limit: int = 5) -> None:
    """Pretty print the first records of a /filtered response."""
    print(f"  Date used: {data.get('date_used')}")
    print(f"  Total records: {data.get('total_records', 0)}")

    for record in data.get("data", [])[:limit]:
        print(f"\n  - {record.get('id_del_proceso', 'N/A')} | {record.get('entidad', 'N/A')}")
        description = str(record.get("descripci_n_del_procedimiento", ""))
        if len(description) > 120:
            description = description[:120] + "..."
        print(f"    {description}")
        print(f"    Precio base: {record.get('precio_base', 'N/A')}")
        print(f"    URL: {record.get('urlproceso', 'N/A')}")


def print_analysis(data: dict) -> None:
    """Pretty print an /analyzed response."""
    print("\n" + "=" * 60)
    print("AI ANALYSIS")
    print("=" * 60)
    print(f"Date used: {data.get('date_used')}")
    print(f"Records analyzed: {data.get('total_records_analyzed', 0)}")

    analysis = data.get("ai_analysis")
    if isinstance(analysis, dict) and "error" in analysis:
        print(f"\nAnalysis error: {analysis['error']}")
        if analysis.get("raw"):
            print(f"Raw reply: {analysis['raw'][:500]}")
    elif isinstance(analysis, str):
        print(f"\n{analysis}")
    else:
        print(json.dumps(analysis, indent=2, ensure_ascii=False))

    print("\n" + "=" * 60)


def main():
    parser = argparse.ArgumentParser(description="E2E demo for SECOP Relay")
    parser.add_argument("--fecha", help="Publication date YYYY-MM-DD (default: previous business day)")
    parser.add_argument("--no-ai", action="store_true", help="Skip the /analyzed endpoint")
    parser.add_argument("--json", action="store_true", help="Output raw JSON")
    args = parser.parse_args()

    print("=" * 60)
    print("SECOP RELAY - E2E DEMO")
    print("=" * 60)

    with httpx.Client(timeout=ANALYSIS_TIMEOUT) as client:
        # Step 1: Health check
        print("\n[1/3] Checking API health...")
        if not check_health(client):
            print("  Error: API is not responding. Run 'python -m app.run' first.")
            sys.exit(1)
        print("  API is healthy")

        # Step 2: Filtered records
        print("\n[2/3] Testing GET /filtered...")
        try:
            filtered = get_endpoint(client, "/filtered", args.fecha)
        except httpx.HTTPStatusError as e:
            print(f"  Error: {e.response.text}")
            sys.exit(1)
        print_records(filtered)

        if args.no_ai:
            return

        # Step 3: AI analysis
        print("\n[3/3] Testing GET /analyzed (this may take a while)...")
        try:
            analyzed = get_endpoint(client, "/analyzed", args.fecha)
        except httpx.HTTPStatusError as e:
            print(f"  Error: {e.response.text}")
            sys.exit(1)

    if args.json:
        print(json.dumps(analyzed, indent=2, ensure_ascii=False))
    else:
        print_analysis(analyzed)


if __name__ == "__main__":
    main()
