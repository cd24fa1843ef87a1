import argparse
import logging
import re
import sys
from typing import List, Optional, Sequence

from binary_search import REFERENCE_SEQUENCE, VARIANTS, contains, search_steps
from sequence import generate_sorted_array
from settings import LOG_LEVELS, MAX_ARRAY_SIZE, MIN_ARRAY_SIZE, load_settings

logger = logging.getLogger(__name__)

PROMPT = "Enter a number: "

INTEGER = re.compile(r"[+-]?[0-9]+")


def read_int(prompt: str = PROMPT) -> Optional[int]:
    """Prompt until a plain decimal integer is entered; None once input runs out."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            logger.debug("input closed before a number was entered")
            return None
        text = line.strip()
        if INTEGER.fullmatch(text):
            return int(text)
        logger.debug("not an integer: %r", line)


def array_size(text: str) -> int:
    try:
        size = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
        raise argparse.ArgumentTypeError(f"must be between {MIN_ARRAY_SIZE} and {MAX_ARRAY_SIZE}, got {size}")
    return size


def format_step(step) -> str:
    return (
        f"depth={step['depth']} low={step['low']} high={step['high']} "
        f"mid={step['mid']} value={step['value']} -> {step['direction']}"
    )


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bin-search",
        description="Look a number up in a sorted sequence with binary search.",
    )
    ap.add_argument("--variant", choices=VARIANTS, default=settings.variant)
    ap.add_argument("--trace", action="store_true", help="Print every probe before the result.")

    ap.add_argument("--generate", action="store_true",
                    help="Search a seeded generated sequence instead of the reference one.")
    ap.add_argument("--array_size", type=array_size, default=settings.array_size)
    ap.add_argument("--min_value", type=int, default=settings.min_value)
    ap.add_argument("--max_value", type=int, default=settings.max_value)
    ap.add_argument("--seed", type=int, default=settings.seed)

    ap.add_argument("--log_level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    values: Sequence[int] = REFERENCE_SEQUENCE
    if args.generate:
        try:
            values = generate_sorted_array(args.array_size, args.min_value, args.max_value, args.seed)
        except ValueError as e:
            raise SystemExit(str(e))
        print("Sequence:", " ".join(str(v) for v in values))

    target = read_int()
    # no number entered counts as absent
    if target is None:
        print("Not found!")
        return 0

    if args.trace:
        for step in search_steps(values, target, variant=args.variant):
            print(format_step(step))

    if contains(values, target, 0, len(values) - 1, variant=args.variant):
        print("Found!")
    else:
        print("Not found!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
