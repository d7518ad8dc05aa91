"""Fridge stock and recipe matching."""

import logging
from dataclasses import dataclass, field
from datetime import date

from recipe_finder.domain.ingredients import FridgeIngredient, Ingredient
from recipe_finder.domain.recipes import Recipe, RecipeCollection
from recipe_finder.services.clock import Clock, SystemClock

_logger = logging.getLogger(__name__)


@dataclass
class Fridge:
    """Fridge contents keyed by ingredient name.

    Adding an item whose name is already stocked replaces the earlier entry;
    quantities are never merged.
    """

    clock: Clock = field(default_factory=SystemClock)
    _items: dict[str, FridgeIngredient] = field(default_factory=dict, init=False)

    def add_item(self, item: FridgeIngredient) -> None:
        """Stock an item, replacing any entry with the same name."""
        self._items[item.name] = item

    def get_item(self, name: str) -> FridgeIngredient | None:
        """Return the stocked item for a name, if present."""
        return self._items.get(name)

    def __len__(self) -> int:
        return len(self._items)

    def has_unexpired_item(self, ingredient: Ingredient) -> bool:
        """Return True when the fridge can supply the ingredient today."""
        return self._match(ingredient, self.clock.today()) is not None

    def find_recipe(self, collection: RecipeCollection) -> Recipe | None:
        """Pick the cookable recipe whose ingredients expire soonest.

        A recipe is cookable when every ingredient is stocked in the same
        unit, in at least the required amount, and has not expired. Among
        cookable recipes the one with the earliest minimum use-by date wins;
        on equal dates the recipe seen first is kept.
        """
        if collection.is_empty():
            return None

        today = self.clock.today()
        best_recipe: Recipe | None = None
        best_use_by: date | None = None
        for recipe in collection:
            ingredients = recipe.get_ingredients()
            if not ingredients:
                continue

            min_use_by = self._min_use_by_date(ingredients, today)
            if min_use_by is None:
                _logger.debug("Recipe %s cannot be made", recipe.name)
                continue

            _logger.debug("Recipe %s can be made, use by %s", recipe.name, min_use_by)
            if best_use_by is None or min_use_by < best_use_by:
                best_recipe = recipe
                best_use_by = min_use_by

        return best_recipe

    def _min_use_by_date(
        self, ingredients: list[Ingredient], today: date
    ) -> date | None:
        """Return the earliest use-by date of the matched items, or None."""
        min_use_by: date | None = None
        for ingredient in ingredients:
            stocked = self._match(ingredient, today)
            if stocked is None:
                return None
            if min_use_by is None or stocked.use_by_date < min_use_by:
                min_use_by = stocked.use_by_date
        return min_use_by

    def _match(self, ingredient: Ingredient, today: date) -> FridgeIngredient | None:
        stocked = self._items.get(ingredient.name)
        if stocked is None:
            return None
        if (
            stocked.amount >= ingredient.amount
            and stocked.unit == ingredient.unit
            and not stocked.has_expired(today)
        ):
            return stocked
        return None
