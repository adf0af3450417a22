from __future__ import annotations
import argparse
import logging
import sys
from gridsweep.session import GameState, Session, SessionConfig


def positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Uncover every safe cell without hitting a hazard.')
    parser.add_argument('--width', type=positive_int, default=3)
    parser.add_argument('--height', type=positive_int, default=3)
    parser.add_argument('--hazards', type=non_negative_int, default=5,
                        help='Requested hazard count; capped at 5/9 of the cells')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging.')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    config = SessionConfig(args.width, args.height, args.hazards,
                           seed=(None if args.seed < 0 else args.seed))
    state, _ = Session.from_config(config).run()
    return 1 if state is GameState.Lost else 0


if __name__ == '__main__':
    sys.exit(main())
