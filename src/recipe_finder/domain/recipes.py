"""Domain models for recipes and recipe collections."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from recipe_finder.domain.ingredients import Ingredient
from recipe_finder.errors import ValidationError


@dataclass(init=False)
class Recipe:
    """A named recipe with its required ingredients in order."""

    name: str
    ingredients: list[Ingredient]

    def __init__(self, name: str, ingredients: Iterable[Ingredient] = ()) -> None:
        if not name:
            raise ValidationError("Recipe name cannot be empty.")
        self.name = name
        self.ingredients = []
        for ingredient in ingredients:
            self.add_ingredient(ingredient)

    def add_ingredient(self, item: Ingredient) -> None:
        """Append an ingredient, keeping insertion order."""
        if not isinstance(item, Ingredient):
            raise ValidationError("Passed item is not a valid Ingredient object.")
        self.ingredients.append(item)

    def get_ingredients(self) -> list[Ingredient]:
        """Return the required ingredients in the order they were added."""
        return self.ingredients


@dataclass
class RecipeCollection:
    """Append-only ordered collection of recipes."""

    _recipes: list[Recipe] = field(default_factory=list, init=False)

    def add_recipe(self, recipe: Recipe) -> None:
        """Append a recipe, keeping insertion order."""
        if not isinstance(recipe, Recipe):
            raise ValidationError("Passed item is not a valid Recipe object.")
        self._recipes.append(recipe)

    def is_empty(self) -> bool:
        """Return True when no recipe has been added."""
        return not self._recipes

    def __iter__(self) -> Iterator[Recipe]:
        return iter(self._recipes)

    def __len__(self) -> int:
        return len(self._recipes)
