"""Command line entry point for rank-approximate sample sizing."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from ra_sampling.sampling import RankApproxInputs, RankApproxService
from ra_sampling.scripts.logger import setup_logging

logger = logging.getLogger("ra_sampling.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ra-sampling",
        description=(
            "Minimum number of random samples so that, with probability alpha, "
            "k of them lie within the top tau percent of n points."
        ),
    )
    parser.add_argument("--n", type=int, required=True, help="Population size")
    parser.add_argument(
        "--k", type=int, default=1, help="Neighbors required in the top band"
    )
    parser.add_argument(
        "--tau", type=float, default=5.0, help="Rank-approximation in percent"
    )
    parser.add_argument(
        "--alpha", type=float, default=0.95, help="Desired success probability"
    )
    parser.add_argument(
        "--curve", action="store_true", help="Also print the confidence curve"
    )
    parser.add_argument(
        "--draw", action="store_true", help="Draw the distinct candidate indices"
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed")
    parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the ra_sampling log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging()
    if args.log_level:
        logging.getLogger("ra_sampling").setLevel(args.log_level)

    inputs = RankApproxInputs(
        n=args.n, k=args.k, tau=args.tau, alpha=args.alpha, seed=args.seed
    )
    results = RankApproxService.calculate(inputs, include_curve=args.curve)

    if not results.success:
        logger.error(f"Invalid inputs: {results.error_message}")
        print(f"error: {results.error_message}", file=sys.stderr)
        return 2

    payload = results.to_dict()
    if args.draw:
        candidates = RankApproxService.draw_candidates(
            inputs, sample_size=results.sample_size
        )
        payload["candidates"] = candidates.tolist()

    if args.json:
        print(json.dumps(payload, indent=2))
        return 0

    print(f"n={results.n}, k={results.k}, tau={results.tau}%, alpha={results.alpha}")
    print(f"Rank cutoff t: {results.rank_cutoff}")
    print(f"Minimum samples required: {results.sample_size}")
    print(f"Achieved success probability: {results.achieved_probability:.6f}")
    print(f"Sample fraction: {results.sample_fraction:.4%}")

    for point in results.confidence_curve:
        print(
            f"  alpha={point.alpha:.4f}  m={point.sample_size}  "
            f"speedup={point.speedup:.2f}x"
        )

    if args.draw:
        print(f"Distinct candidates drawn: {len(payload['candidates'])}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
