"""Command-line entry point for the recipe finder."""

import argparse
import sys
from collections.abc import Sequence
from datetime import date

from pydantic import ValidationError as PydanticValidationError

from recipe_finder.app_logging import configure_logging
from recipe_finder.config import Settings
from recipe_finder.containers import build_container
from recipe_finder.domain.ingredients import parse_use_by_date
from recipe_finder.errors import RecipeFinderError, ValidationError


def _date_argument(value: str) -> date:
    try:
        return parse_use_by_date(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(f"expected DD/MM/YYYY, got {value!r}") from exc


def _describe_settings_error(exc: PydanticValidationError) -> str:
    """Summarize the first settings error as a single line."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid setting {location}: {first['msg']}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="recipe-finder",
        description="Pick a recipe that can be cooked from the fridge contents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    run_parser = subparsers.add_parser(
        "run", help="Match recipes against the fridge and print the best one"
    )
    run_parser.add_argument("recipes", help="Path to the recipe JSON data file")
    run_parser.add_argument("fridge", help="Path to the fridge contents CSV file")
    run_parser.add_argument(
        "--today",
        type=_date_argument,
        default=None,
        help="Evaluate use-by dates as of this DD/MM/YYYY date",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        settings = Settings()
    except PydanticValidationError as exc:
        print(f"Error: {_describe_settings_error(exc)}")
        return 1
    if args.today is not None:
        settings = settings.model_copy(update={"today": args.today})
    configure_logging(settings.log_level)

    container = build_container(settings)
    try:
        result = container.finder_service.find(args.recipes, args.fridge)
    except RecipeFinderError as exc:
        print(f"Error: {exc}")
        return 1

    if result.recipe is None:
        print(settings.no_match_message)
    else:
        print(result.recipe.name)
    return 0


def run() -> None:
    """Console script wrapper around `main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
