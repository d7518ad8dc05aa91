"""Dependency container wiring for the application."""

from dataclasses import dataclass

from recipe_finder.adapters.csv_fridge_loader import CsvFridgeLoader
from recipe_finder.adapters.json_recipe_loader import JsonRecipeLoader
from recipe_finder.config import Settings
from recipe_finder.services.clock import Clock, FixedClock, SystemClock
from recipe_finder.services.finder import RecipeFinderService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    recipe_loader: JsonRecipeLoader
    fridge_loader: CsvFridgeLoader
    finder_service: RecipeFinderService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    clock: Clock = (
        FixedClock(resolved_settings.today)
        if resolved_settings.today is not None
        else SystemClock()
    )
    recipe_loader = JsonRecipeLoader()
    fridge_loader = CsvFridgeLoader(delimiter=resolved_settings.csv_delimiter)
    finder_service = RecipeFinderService(
        recipe_loader=recipe_loader,
        fridge_loader=fridge_loader,
        clock=clock,
    )
    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        recipe_loader=recipe_loader,
        fridge_loader=fridge_loader,
        finder_service=finder_service,
    )
