"""Command-line interface for generating party rounds from a roster file."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from partyshuffle.config import GenerateOptions
from partyshuffle.config_loader import OptionsProfile
from partyshuffle.ingest import RosterValidationError, filter_name_candidates, load_roster, rows_to_players
from partyshuffle.models import Player
from partyshuffle.optimizer import GenerationResult, generate_all_rounds
from partyshuffle.report import export_rounds_to_csv


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shuffle a ranked roster into balanced parties")
    parser.add_argument("roster", type=Path, help="Roster file: 'name, rank' per line, or a name,rank CSV")
    parser.add_argument("--rounds", type=int, default=None, help="Number of rounds to generate (default 1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible rounds")
    parser.add_argument("--candidates", type=int, default=None, help="Independent restarts per round")
    parser.add_argument("--swap-iterations", type=int, default=None, help="Swap attempts per restart")
    parser.add_argument("--balance-weight", type=float, default=None, help="Weight of the strength balance penalty")
    parser.add_argument("--diversity-weight", type=float, default=None, help="Weight of the repeat pairing penalty")
    parser.add_argument("--leader-weight", type=float, default=None, help="Weight of the leader rotation penalty")
    parser.add_argument("--hard-penalty", type=float, default=None, help="Penalty per repeated exact party")
    parser.add_argument("--load-profile", type=Path, help="Load options JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save options JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Optional CSV path for the generated parties")
    parser.add_argument("--json", dest="json_path", type=Path, default=None, help="Optional path to write rounds JSON")
    parser.add_argument(
        "--extract-names",
        action="store_true",
        help="Treat the input as OCR text and print name candidates instead of generating rounds",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log optimizer progress")
    return parser.parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> tuple[GenerateOptions, int]:
    options = GenerateOptions.from_env()
    rounds = 1
    if args.load_profile:
        profile = OptionsProfile.load(args.load_profile)
        options = profile.to_options(options)
        rounds = profile.rounds or rounds
    options = options.with_overrides(
        candidate_count=args.candidates,
        swap_iterations=args.swap_iterations,
        balance_weight=args.balance_weight,
        diversity_weight=args.diversity_weight,
        leader_weight=args.leader_weight,
        hard_penalty=args.hard_penalty,
    )
    if args.rounds is not None:
        rounds = args.rounds
    return options, max(1, rounds)


def _result_payload(result: GenerationResult, players: Sequence[Player]) -> dict:
    return {
        "rounds": [
            {
                "round": round_data.round,
                "teams": [[member.name for member in team.members] for team in round_data.teams],
                "metrics": asdict(round_data.metrics),
                "discord_text": round_data.discord_text,
            }
            for round_data in result.rounds
        ],
        "summary": {
            "pair_duplicate_total": result.summary.pair_duplicate_total,
            "max_pair_count": result.summary.max_pair_count,
            "duplicate_teams": result.summary.duplicate_teams,
            "leader_counts": [
                {"player_id": player.id, "name": player.name, "count": result.summary.leader_counts.get(player.id, 0)}
                for player in players
            ],
            "max_leader_count": result.summary.max_leader_count,
            "min_leader_count": result.summary.min_leader_count,
            "leader_warning": result.summary.leader_warning,
        },
    }


def _print_summary(result: GenerationResult, players: Sequence[Player]) -> None:
    summary = result.summary
    print("Summary:")
    print(f"  Pair repeats: {summary.pair_duplicate_total} (max pair count {summary.max_pair_count})")
    print(f"  Duplicate parties: {summary.duplicate_teams}")
    leaders = ", ".join(f"{player.name}={summary.leader_counts.get(player.id, 0)}" for player in players)
    print(f"  Leader counts: {leaders}")
    if summary.leader_warning:
        print(
            f"  Warning: leader counts range {summary.min_leader_count}-{summary.max_leader_count}; "
            "consider more rounds or a higher leader weight"
        )


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.extract_names:
        for name in filter_name_candidates(args.roster.read_text(encoding="utf-8")):
            print(name)
        return

    options, rounds = _resolve_options(args)
    if args.save_profile:
        OptionsProfile.from_options(options, rounds).save(args.save_profile)
        print(f"Saved options profile to {args.save_profile}")

    try:
        players = rows_to_players(load_roster(args.roster))
    except RosterValidationError as exc:
        raise SystemExit("\n".join(f"Roster error: {error}" for error in exc.errors)) from exc

    result = generate_all_rounds(players, rounds, options, seed=args.seed)

    for round_data in result.rounds:
        print(round_data.discord_text)
        print()
    _print_summary(result, players)

    if args.output:
        args.output.write_text(export_rounds_to_csv(result.rounds), encoding="utf-8")
        print(f"Wrote parties CSV to {args.output}")
    if args.json_path:
        args.json_path.write_text(json.dumps(_result_payload(result, players), indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Wrote rounds JSON to {args.json_path}")


if __name__ == "__main__":
    main()
