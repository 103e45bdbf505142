# apps/cli/run.py
"""
CLI entry point for benchmarking a guess-selection strategy.

This script:
  1) Validates the word list(s) (prints counts + SHA, checks answers ⊆ words).
  2) Loads the Dictionary, builds the pattern table if asked (or if the
     solver needs it) and instantiates the requested solver.
  3) Plays every secret (or a seeded sample) with a live progress bar,
     prints win rate and average turns, and writes:
       - CSV:  per-game results + guess/pattern/candidates columns
       - JSON: manifest with config, summary, wordlist hashes, git commit

Example:
    python -m apps.cli.run --solver heuristic --words data/words_5.txt --first-guess salet
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordlebits.datasets import validate_wordlists, pretty_summary, read_lines
from wordlebits.engine import Dictionary, MAX_TURNS, WORD_LEN
from wordlebits.engine.errors import DictionaryError
from wordlebits.harness import run_batch, summarize, write_csv, write_manifest
from wordlebits.harness.io import timestamp_id, git_commit_or_unknown
from wordlebits.solvers import REGISTRY, create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlebits — benchmark a guess selector")
    ap.add_argument("--solver", default="heuristic",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="data/words_5.txt",
                    help="dictionary file, one 5-letter word per line")
    ap.add_argument("--answers",
                    help="secrets to play (default: every dictionary word)")
    ap.add_argument("--first-guess", default="salet",
                    help="fixed opening guess ('' lets the solver choose)")
    ap.add_argument("--sample", type=int,
                    help="play only a seeded random subset of the secrets")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (sampling + random solver)")
    ap.add_argument("--precompute", action="store_true",
                    help="build the pattern table even if the solver does not need it")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only on a terminal)")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(WORD_LEN, args.words, args.answers)
    print(pretty_summary(rep))

    # 2) Load the dictionary; the first malformed record aborts the run
    try:
        dictionary = Dictionary.from_file(args.words)
    except DictionaryError as e:
        print(f"Cannot load {args.words}: {e}", file=sys.stderr)
        return 2

    if args.solver not in REGISTRY:
        ap.error(f"unknown solver {args.solver!r} (one of: {solver_choices})")
    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    if args.precompute or REGISTRY[args.solver].requires_table:
        dictionary.precompute_entropy_table(progress=show_bar)

    rng = random.Random(args.seed)
    solver = create_solver(args.solver, rng=rng)

    # 3) Choose cases (deterministic sample by seed)
    secrets = [w.strip().lower() for w in read_lines(args.answers)] if args.answers else list(dictionary.words)
    if args.sample and args.sample < len(secrets):
        secrets = rng.sample(secrets, args.sample)

    first_guess = args.first_guess or None
    if first_guess is not None and first_guess not in dictionary:
        ap.error(f"first guess {first_guess!r} is not in the dictionary")

    progress = None
    if show_bar:
        def progress(it):
            return tqdm(it, ncols=80, desc="Running", unit="game")

    # 4) Run batch
    results = run_batch(solver, dictionary, secrets=secrets, first_guess=first_guess,
                        max_turns=MAX_TURNS, progress=progress)
    summary = summarize(results)

    print()
    print(f"Winrate: {summary['win_rate']:.2f} %")
    print(f"Av.turn: {summary['avg_turns']:.3f}")
    print()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{solver.id}_{run_id}.csv"
    manifest_path = outdir / f"run_{solver.id}_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": summary,
        "solver_id": solver.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
