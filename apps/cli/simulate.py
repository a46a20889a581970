# apps/cli/simulate.py
"""
Self-play benchmark for the assistant.

This script:
  1) Loads the dictionary (same options as the interactive assistant).
  2) Plays every answer (or a seeded sample) with the chosen solver, using
     the scorer as the "real game".
  3) Writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config and word-list report

Usage:
    python -m apps.cli.simulate --words words.txt --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path

from tqdm import tqdm

from wordlebot.datasets import DICTIONARY_URL, WORD_LENGTH, validate_wordlist
from wordlebot.harness import DEFAULT_OPENER, WORDLE_MAX_TURNS, run_case
from wordlebot.harness.io import timestamp_id, write_csv, write_manifest
from wordlebot.solvers import create_solver, get_solver_ids

from apps.cli.play import dictionary_from_args


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordlebot — self-play benchmark")
    ap.add_argument("--solver", default="entropy",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--words", help="path to a word list (default: download --url)")
    ap.add_argument("--url", default=DICTIONARY_URL, help="word list URL")
    ap.add_argument("--length", type=int, default=WORD_LENGTH, help="word length")
    ap.add_argument("--opener", default=DEFAULT_OPENER, help="fixed first guess")
    ap.add_argument("--max-guesses", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("--sample", type=int, help="play only a seeded sample of answers")
    ap.add_argument("--seed", type=int, default=123, help="seed for the --sample shuffle")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    dictionary = dictionary_from_args(args)
    solver = create_solver(args.solver)

    # Deterministic sample by seed
    cases = list(dictionary)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    iterator = tqdm(cases, ncols=80, desc=solver.id, unit="game",
                    disable=args.progress == "off")

    results = []
    for ans in iterator:
        r = run_case(solver, ans, dictionary=dictionary, opener=args.opener,
                     max_turns=args.max_guesses)
        r["solver_id"] = solver.id
        results.append(r)

    wins = [r["guesses"] for r in results if r["success"]]
    if results:
        mean = sum(wins) / len(wins) if wins else float("nan")
        print(f"Solved {len(wins)}/{len(results)} | mean guesses when solved: {mean:.3f}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"),
                         max_turns=args.max_guesses, N=args.length)
    manifest = {
        "run_id": run_id,
        "config": vars(args),
        "wordlist": validate_wordlist(args.length, args.words) if args.words else {"url": args.url},
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    manifest_path = write_manifest(manifest, str(outdir / f"run_{run_id}_manifest.json"))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
