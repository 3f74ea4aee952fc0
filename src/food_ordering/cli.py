"""
CLI entry point — runs one ordering session at the console.

Interactive by default. Any of the order flags switches to a scripted run:
the flags are turned into answers and replayed through the same dialogue.

Usage:
    # Interactive:
    python -m food_ordering.cli

    # Scripted — a burger with extra cheese, paid by credit card:
    python -m food_ordering.cli --item 2 --add-on cheese --quantity 1 --payment 1

    # Show payment / workflow logs:
    python -m food_ordering.cli --log-level INFO
"""

import argparse
import logging

from food_ordering.console import ConsoleIO, OrderingIO, ScriptedIO
from food_ordering.domain.pricing import MenuCatalog
from food_ordering.session import OrderSession

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
SCRIPTED_FLAGS = ("item", "quantity", "payment")


def is_scripted(args: argparse.Namespace) -> bool:
    return any(getattr(args, name) is not None for name in (*SCRIPTED_FLAGS, "add_on"))


def scripted_answers(args: argparse.Namespace) -> list[str]:
    """Turn order flags into answers, in the order the session asks for them.

    Expects --item, --quantity and --payment to all be set; `main()` rejects
    a partial set before this runs.
    """
    selected = {MenuCatalog.add_on(key) for key in args.add_on or []}
    return [
        args.item,
        *("yes" if add_on in selected else "no" for add_on in MenuCatalog.ADD_ONS.values()),
        args.quantity,
        args.payment,
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Order food at the console")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--item", default=None, help="Menu option, e.g. 1 for Pizza")
    parser.add_argument(
        "--add-on",
        action="append",
        choices=sorted(MenuCatalog.ADD_ONS),
        help="Add-on to apply; repeat for more than one",
    )
    parser.add_argument("--quantity", default=None, help="Quantity, e.g. 2 or 1.5")
    parser.add_argument("--payment", default=None, help="Payment option, e.g. 1 for Credit Card")
    return parser


def run(args: argparse.Namespace) -> int:
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    logger = logging.getLogger(__name__)

    io: OrderingIO
    if is_scripted(args):
        io = ScriptedIO(scripted_answers(args), echo=True)
        logger.info("Running scripted session")
    else:
        io = ConsoleIO()

    try:
        outcome = OrderSession(io).run()
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed before the order was complete")
        return 1
    return 0 if outcome.succeeded else 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if is_scripted(args):
        missing = [f"--{name}" for name in SCRIPTED_FLAGS if getattr(args, name) is None]
        if missing:
            parser.error(f"scripted order also needs {', '.join(missing)}")
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
