"""Entry point: ``python -m mt64``.

Supports two modes:
  - ``python -m mt64``           → Seed one generator and print sample batches
  - ``python -m mt64 serve``     → Launch the FastAPI server around a shared generator
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from mt64.config import EngineConfig
from mt64.core.enums import Distribution
from mt64.core.errors import InvalidArgument
from mt64.systems.mersenne import MersenneTwister64
from mt64.utils.logging import setup_logging
from mt64.utils.recorder import DrawRecorder

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="64-bit Mersenne Twister (MT19937-64)")
    sub = parser.add_subparsers(dest="command")

    # --- Demo mode (default) ---
    demo = sub.add_parser("demo", help="Print sample output from every operation (default)")
    demo.add_argument("--seed", type=int, default=None, help="Explicit seed (default: current time in ms)")
    demo.add_argument("--size", type=int, default=8, help="Values per batch")
    demo.add_argument("--bound", type=int, default=8, help="Bound for randint / randfloat / randdouble")
    demo.add_argument("--out", type=str, default=None, help="Also write the batches to this JSON file")
    demo.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    # --- Server mode ---
    srv = sub.add_parser("serve", help="Start the HTTP server")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=None)
    srv.add_argument("--max-batch", type=int, default=10_000)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def run_demo(
    config: EngineConfig,
    out: TextIO | None = None,
    engine: MersenneTwister64 | None = None,
) -> list[tuple[Distribution, list[int] | list[float]]]:
    """Print the seed and one batch per operation; return the batches."""
    if out is None:
        out = sys.stdout
    if engine is None:
        engine = MersenneTwister64(config.seed)

    size = config.demo_size
    bound = config.demo_bound
    plan: list[tuple[str, Distribution, dict]] = [
        ("random", Distribution.UNIFORM, {}),
        ("random int", Distribution.RANDINT, {"bound": bound}),
        ("random float", Distribution.RANDFLOAT, {"bound": bound}),
        ("random double", Distribution.RANDDOUBLE, {"bound": bound}),
        ("random range", Distribution.RANDRANGE, {"low": -size, "high": size}),
    ]

    recorder = DrawRecorder(config.record_file, engine.initial_seed) if config.record_file else None

    print("Mersenne Twister 64 bit", file=out)
    print(f"seed: {engine.get_seed()}", file=out)

    batches: list[tuple[Distribution, list[int] | list[float]]] = []
    for title, dist, params in plan:
        values = engine.draw(dist, size, **params)
        print(title, file=out)
        for value in values:
            print(value, file=out)
        batches.append((dist, values))
        if recorder is not None:
            recorder.record(dist, values, params)
        logger.debug("%s: drew %d values (cursor=%d)", dist.name, len(values), engine.cursor)

    if recorder is not None:
        recorder.flush()
    return batches


def _run_demo(args: argparse.Namespace) -> None:
    config = EngineConfig(
        seed=args.seed,
        demo_size=args.size,
        demo_bound=args.bound,
        record_file=args.out,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)
    try:
        run_demo(config)
    except InvalidArgument as exc:
        logger.error("Demo aborted: %s", exc)
        raise


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from mt64.api.app import create_app

    config = EngineConfig(
        seed=args.seed,
        host=args.host,
        port=args.port,
        max_batch=args.max_batch,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to demo mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["demo"])

    if args.command == "demo":
        _run_demo(args)
    elif args.command == "serve":
        _run_server(args)


if __name__ == "__main__":
    main()
