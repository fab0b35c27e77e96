"""
CLI to rank the nodes of a tab-delimited link dump.

Reads a YAML run config (config/pagerank.yml by default), streams the edge
file into a Pagerank instance, iterates to convergence and prints the top
of the ranking. Command-line flags override values from the config file.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import argparse
import time

import yaml

from algorithms import DEFAULT_THRESHOLD, ConvergenceError
from edge_stream import ingest_file
from pagerank import Pagerank
from ranking import write_ranking_csv

DEFAULT_CONFIG = Path(__file__).parent / "config" / "pagerank.yml"


@dataclass(frozen=True)
class RunConfig:
    input: Path
    damping_percent: int = 85
    threshold: float = DEFAULT_THRESHOLD
    max_iterations: Optional[int] = None
    top: int = 10
    output: Optional[Path] = None


@dataclass(frozen=True)
class RunSummary:
    nodes: int
    edges: int
    skipped: int
    iterations: int
    duration_sec: float
    top: List[Tuple[str, float]]


def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(path.read_text()) or {}
    if not data.get("input"):
        raise ValueError(f"{path}: run config requires 'input'.")

    base = path.parent
    max_iterations = data.get("max_iterations")
    output = data.get("output")
    return RunConfig(
        input=_resolve(base, data["input"]),
        damping_percent=int(data.get("damping_percent", 85)),
        threshold=float(data.get("threshold", DEFAULT_THRESHOLD)),
        max_iterations=int(max_iterations) if max_iterations is not None else None,
        top=int(data.get("top", 10)),
        output=_resolve(base, output) if output else None,
    )


def _resolve(base: Path, value: str) -> Path:
    p = Path(value)
    return p if p.is_absolute() else base / p


def run_pagerank(cfg: RunConfig) -> RunSummary:
    """
    Load, iterate and rank according to cfg.

    Returns the graph totals, iteration count and the top-ranked
    (node, score) pairs.
    """
    start = time.time()
    pr: Pagerank[str] = Pagerank()
    pr.set_damping(cfg.damping_percent)

    stats = ingest_file(pr, cfg.input)
    print(f"[pagerank] graph size is {pr.node_count()} nodes with {pr.edge_count()} edges between them")
    if stats.skipped:
        print(f"[pagerank] skipped {stats.skipped} malformed records of {stats.records}")

    iterations = pr.run_until(cfg.threshold, cfg.max_iterations)
    print(f"[pagerank] converged below {cfg.threshold} after {iterations} iterations")

    ranking = pr.ranked_nodes()
    if cfg.output:
        write_ranking_csv(ranking, cfg.output)
        print(f"[pagerank] wrote {len(ranking)} ranked nodes to {cfg.output}")

    return RunSummary(
        nodes=pr.node_count(),
        edges=pr.edge_count(),
        skipped=stats.skipped,
        iterations=iterations,
        duration_sec=time.time() - start,
        top=ranking[: cfg.top],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank nodes of a tab-delimited link dump")
    parser.add_argument("--config", type=Path, default=None, help="YAML run config")
    parser.add_argument("--input", type=Path, default=None, help="edge file (overrides config)")
    parser.add_argument("--damping", type=int, default=None, help="damping percent in [0, 100)")
    parser.add_argument("--threshold", type=float, default=None)
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--top", type=int, default=None)
    parser.add_argument("--output", type=Path, default=None, help="ranking CSV path")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    config_path = args.config
    if config_path is None and args.input is None:
        config_path = DEFAULT_CONFIG

    if config_path is not None:
        cfg = load_config(config_path)
    else:
        cfg = RunConfig(input=args.input)

    overrides = {
        "input": args.input,
        "damping_percent": args.damping,
        "threshold": args.threshold,
        "max_iterations": args.max_iterations,
        "top": args.top,
        "output": args.output,
    }
    return replace(cfg, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = config_from_args(args)

    try:
        summary = run_pagerank(cfg)
    except ConvergenceError as exc:
        print(f"[pagerank] {exc}")
        return 1

    for rank, (node, score) in enumerate(summary.top, start=1):
        print(f"{rank:>4}  {node}  {score:.6f}")
    print(f"[pagerank] completed in {summary.duration_sec:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
