from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import LINE_ENDINGS, FlattenConfig
from .engine import FlatteningEngine
from .io_utils import read_json_content
from .logging_setup import configure_logging
from .tables import RowPolicy
from .tokens import iter_tokens

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="json-csv-flattener",
        description="Flatten a JSON document into one comma-separated block per array.",
    )
    p.add_argument("--input", required=True, type=Path, help="Path to the JSON document.")
    p.add_argument("--output", type=Path, default=None, help="Where to write the blocks (stdout if omitted).")
    p.add_argument(
        "--row-policy",
        choices=[policy.value for policy in RowPolicy],
        default=RowPolicy.DROP_RAGGED_ROW.value,
        help="What to do with rows some columns have no value for.",
    )
    p.add_argument("--line-ending", choices=sorted(LINE_ENDINGS), default="crlf")
    p.add_argument("--shorten-labels", action="store_true", default=False)
    p.add_argument("-v", "--verbose", action="store_true", default=False)
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = FlattenConfig.from_options(args.row_policy, args.line_ending, args.shorten_labels)
        data = read_json_content(args.input)
    except (ValueError, OSError) as e:
        logger.error("Could not read %s: %s", args.input, e)
        return 1

    text = FlatteningEngine(iter_tokens(data), config).serialize()

    if args.output is None:
        sys.stdout.write(text)
        if text:
            sys.stdout.write(config.line_terminator)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w", newline="", encoding="utf-8") as f:
        f.write(text)
    logger.info("Wrote %s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
