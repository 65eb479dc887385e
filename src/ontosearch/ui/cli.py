# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ontosearch.app import convert_punned_assertions, run_query
from ontosearch.config import ConfigurationError, configure_logging, get_logging_config
from ontosearch.domain.errors import UnsupportedQueryError
from ontosearch.domain.model import EntityKind
from ontosearch.domain.search import Relation

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query and rewrite statement documents")
    subparsers = parser.add_subparsers(dest="command", required=True)

    query = subparsers.add_parser("query", help="Evaluate a relation for one entity")
    query.add_argument("relation", choices=[relation.value for relation in Relation])
    query.add_argument("kind", choices=[kind.value for kind in EntityKind])
    query.add_argument("iri", type=str, help="Identifier of the queried entity")
    query.add_argument("files", nargs="+", help="Statement documents (JSON)")

    punning = subparsers.add_parser(
        "punning",
        help="Convert data assertions of class-punned individuals into annotations",
    )
    punning.add_argument("files", nargs="+", help="Statement documents (JSON)")
    punning.add_argument(
        "--apply",
        action="store_true",
        help="Apply the planned edit script to the loaded documents in memory",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        logging_config = get_logging_config()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(level=logging_config.level)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        if parsed_args.command == "query":
            for result in run_query(
                parsed_args.relation, parsed_args.kind, parsed_args.iri, parsed_args.files
            ):
                print(result)
        elif parsed_args.command == "punning":
            outcome = convert_punned_assertions(parsed_args.files, apply=parsed_args.apply)
            labels = {
                id(container): container.iri or f"#{position}"
                for position, container in enumerate(outcome.containers)
            }
            for change in outcome.script:
                print(f"[{labels[id(change.container)]}] {change}")
            if outcome.result is not None:
                print(
                    f"applied={outcome.result.applied} added={outcome.result.added} "
                    f"removed={outcome.result.removed} skipped={outcome.result.skipped}"
                )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (ValueError, UnsupportedQueryError):
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
