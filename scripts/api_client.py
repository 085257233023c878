"""Lightweight REST client for the rosterslots API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(text: str) -> dict[str, str]:
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the rosterslots REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster CSV")
    parser.add_argument("--site", default="draftkings", help="Site key")
    parser.add_argument("--sport", default="nfl", help="Sport key")
    parser.add_argument("--roster-mapping", default="", help="JSON mapping for roster columns")
    parser.add_argument("--strict", action="store_true", help="Reject inconsistent slot layouts")
    parser.add_argument("--list-profiles", action="store_true", help="List configured profiles and exit")
    parser.add_argument("--export-path", type=Path, help="Destination path for exported CSV")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_profiles:
            resp = client.get("/profiles")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.roster is None:
            raise SystemExit("roster file is required unless using --list-profiles")

        # Validate locally so a typo fails before the upload.
        mapping = build_mapping(args.roster_mapping)
        files = {"roster": (args.roster.name, args.roster.read_bytes(), "text/csv")}
        data = {
            "site": args.site,
            "sport": args.sport,
            "roster_mapping": json.dumps(mapping) if mapping else None,
            "strict": "true" if args.strict else None,
        }
        resp = client.post("/export", files=files, data={k: v for k, v in data.items() if v is not None})
        if resp.status_code == 400:
            raise SystemExit(f"export rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        if args.export_path:
            args.export_path.write_text(resp.text, encoding="utf-8")
            print(f"CSV export saved to {args.export_path}")
        else:
            print(resp.text)


if __name__ == "__main__":
    main()
