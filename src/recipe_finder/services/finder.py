"""Use case for picking a recipe from files on disk."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from recipe_finder.domain.recipes import Recipe, RecipeCollection
from recipe_finder.services.clock import Clock
from recipe_finder.services.fridge import Fridge

_logger = logging.getLogger(__name__)


class RecipeLoader(Protocol):
    """Source of recipes."""

    def load(self, path: str | Path, collection: RecipeCollection) -> int:
        """Add recipes from path to the collection and return how many."""


class FridgeLoader(Protocol):
    """Source of fridge contents."""

    def load(self, path: str | Path, fridge: Fridge) -> int:
        """Add items from path to the fridge and return how many."""


@dataclass(frozen=True)
class FinderResult:
    """Outcome of a recipe search."""

    recipe: Recipe | None
    recipe_count: int
    item_count: int


@dataclass
class RecipeFinderService:
    """Load recipes and fridge contents, then pick a recipe."""

    recipe_loader: RecipeLoader
    fridge_loader: FridgeLoader
    clock: Clock

    def find(self, recipes_path: str | Path, fridge_path: str | Path) -> FinderResult:
        """Return the best recipe for the fridge, or no recipe."""
        collection = RecipeCollection()
        self.recipe_loader.load(recipes_path, collection)

        fridge = Fridge(clock=self.clock)
        self.fridge_loader.load(fridge_path, fridge)

        recipe = fridge.find_recipe(collection)
        _logger.info(
            "Matched %s from %s recipes and %s fridge items",
            recipe.name if recipe else "nothing",
            len(collection),
            len(fridge),
        )
        return FinderResult(
            recipe=recipe, recipe_count=len(collection), item_count=len(fridge)
        )
