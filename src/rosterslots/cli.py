"""Command-line interface for turning roster files into submission CSVs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rosterslots.config import Site, Sport, get_profile, iter_profiles
from rosterslots.config_loader import MappingProfile
from rosterslots.export import write_lineups
from rosterslots.ingest import DEFAULT_ROSTER_MAPPING, load_roster_csv


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalize DFS rosters into upload-ready lineups")
    parser.add_argument("roster", type=Path, nargs="?", help="Path to roster CSV (one row per player per lineup)")
    parser.add_argument(
        "--site",
        default=Site.DRAFTKINGS.value,
        help="Site key (draftkings, fanduel, or dk/fd)",
    )
    parser.add_argument(
        "--sport",
        default=Sport.NFL.value,
        help="Sport key (nfl, mlb, nba, nhl)",
    )
    parser.add_argument(
        "--column",
        action="append",
        default=[],
        help="Mapping for roster CSV columns (e.g., position=Pos)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument("--output", type=Path, default=None, help="Output CSV path (prints to stdout if omitted)")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail when lineups disagree on slot layout instead of warning",
    )
    parser.add_argument("--list-profiles", action="store_true", help="Print configured site/sport profiles and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable info logging")
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        key = key.strip()
        if key not in DEFAULT_ROSTER_MAPPING:
            allowed = ", ".join(DEFAULT_ROSTER_MAPPING)
            raise ValueError(f"Unknown mapping key '{key}', expected one of: {allowed}")
        mapping[key] = value.strip()
    return mapping


def _print_profiles() -> None:
    for profile in iter_profiles():
        if profile.is_pass_through:
            detail = "pass-through"
        else:
            detail = " -> ".join(phase.wildcard for phase in profile.phases)
        size = "-" if profile.roster_size is None else str(profile.roster_size)
        print(f"{profile.key:<16} size={size:<2} {detail:<14} {' '.join(profile.slot_order)}")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_profiles:
        _print_profiles()
        return 0
    if args.roster is None:
        print("error: a roster CSV is required unless using --list-profiles", file=sys.stderr)
        return 2

    try:
        roster_mapping = _parse_mapping(args.column)
        if args.load_profile:
            mapping_profile = MappingProfile.load(args.load_profile)
            roster_mapping = mapping_profile.roster_mapping | roster_mapping

        if args.save_profile:
            MappingProfile(roster_mapping).save(args.save_profile)
            # stdout may carry the CSV itself.
            print(f"Saved mapping profile to {args.save_profile}", file=sys.stderr)

        profile = get_profile(args.site, args.sport)
        entries = load_roster_csv(args.roster, mapping=roster_mapping or None)
        table = write_lineups(
            entries,
            site=profile.site,
            sport=profile.sport,
            path=args.output,
            strict=args.strict,
        )
    except (OSError, ValueError) as exc:
        # Unknown profile, roster size, layout and bad JSON errors are all ValueErrors.
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.output:
        print(f"Wrote {len(table.rows)} lineups to {args.output}")
    else:
        sys.stdout.write(table.to_csv())
    return 0


if __name__ == "__main__":
    sys.exit(main())
