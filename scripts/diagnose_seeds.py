#!/usr/bin/env python3
"""Level structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --size 80x50 --ascii 42
  python scripts/diagnose_seeds.py --env-file tuning.env 7

If no seeds are provided as CLI args, a default list is used.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from delve import logging_utils  # noqa: E402 import after path fix
from delve.dungeon.config import DungeonConfig  # noqa: E402 import after path fix
from delve.dungeon.debug_checks import analyze  # noqa: E402 import after path fix
from delve.dungeon.pipeline import generate_level  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def _parse_size(raw: str):
    w, _, h = raw.lower().partition("x")
    return int(w), int(h)


def run_for_seed(
    seed: int, width: int = 60, height: int = 45, show_ascii: bool = False, env_file: str | None = None
) -> dict:
    config = DungeonConfig.from_env(env_file=env_file, width=width, height=height, seed=seed)
    level = generate_level(config=config)
    res = analyze(level)
    issues = {k: len(v) for k, v in res.items()}
    report = {
        "seed": seed,
        "spawn": list(level.spawn),
        "rooms": len(level.rooms),
        "issues": issues,
        "ok": all(v == 0 for v in issues.values()),
    }
    if show_ascii:
        report["ascii"] = level.to_ascii().splitlines()
    return report


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Check generated levels for structural issues")
    parser.add_argument("seeds", nargs="*", type=int)
    parser.add_argument("--size", default="60x45", help="world size as WIDTHxHEIGHT")
    parser.add_argument("--ascii", action="store_true", help="include an ASCII rendering of each level")
    parser.add_argument("--env-file", help="dotenv file with DUNGEON_* settings")
    parser.add_argument("--log-level", choices=sorted(logging_utils.LEVELS), help="generator log threshold")
    args = parser.parse_args(argv)
    logging_utils.configure(level=args.log_level)
    width, height = _parse_size(args.size)
    seeds = args.seeds or DEFAULT_SEEDS
    results = [run_for_seed(s, width, height, args.ascii, args.env_file) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
