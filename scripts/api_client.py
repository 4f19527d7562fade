"""Lightweight REST client for the partyshuffle API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_options(raw: str) -> dict:
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid options JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the partyshuffle REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("roster", type=Path, help="Roster text file ('name, rank' per line)")
    parser.add_argument("--rounds", type=int, default=1, help="Number of rounds to request")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--options", default="", help="JSON object of option overrides")
    parser.add_argument("--validate-only", action="store_true", help="Only validate the roster")
    parser.add_argument("--candidates", action="store_true", help="Treat the file as OCR text and list name candidates")
    args = parser.parse_args()

    text = args.roster.read_text(encoding="utf-8")

    with httpx.Client(base_url=args.base_url, timeout=120.0) as client:
        if args.candidates:
            resp = client.post("/candidates", json={"text": text})
            resp.raise_for_status()
            print("\n".join(resp.json()["names"]))
            return

        resp = client.post("/validate", json={"text": text})
        resp.raise_for_status()
        validation = resp.json()
        if not validation["ok"]:
            raise SystemExit("\n".join(validation["errors"]))
        if args.validate_only:
            print(f"Roster OK ({validation['players']} players)")
            return

        payload = {
            "roster": text,
            "rounds": args.rounds,
            "options": build_options(args.options),
            "seed": args.seed,
        }
        resp = client.post("/rounds", json=payload)
        if resp.status_code == 400:
            raise SystemExit(f"Roster rejected: {resp.json().get('detail')}")
        resp.raise_for_status()
        data = resp.json()

    for round_data in data["rounds"]:
        print(round_data["discord_text"])
        print()
    print(json.dumps(data["summary"], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
