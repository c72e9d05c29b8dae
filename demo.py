from __future__ import annotations
import argparse
from typing import List, Optional

from patternhive import DEMOS, DemoConfig, run_demos
from patternhive.log import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the object composition demos")
    parser.add_argument(
        "--only",
        action="append",
        choices=list(DEMOS),
        metavar="NAME",
        help=f"run only this demo (repeatable): {', '.join(DEMOS)}",
    )
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def demo_flow(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = DemoConfig.from_env()
    if args.log_level:
        config = DemoConfig(**{**config.model_dump(), "log_level": args.log_level})

    setup_logging(config.log_level)
    run_demos(args.only, config)


if __name__ == "__main__":
    demo_flow()
