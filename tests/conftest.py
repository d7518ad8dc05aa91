"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

import pytest

from recipe_finder.config import Settings
from recipe_finder.domain.ingredients import FridgeIngredient
from recipe_finder.domain.recipes import Recipe, RecipeCollection
from recipe_finder.services.clock import FixedClock
from recipe_finder.services.finder import FridgeLoader, RecipeLoader
from recipe_finder.services.fridge import Fridge

TODAY = date(2015, 11, 1)


@dataclass
class StaticRecipeLoader(RecipeLoader):
    """Recipe loader that adds a fixed list of recipes."""

    recipes: list[Recipe] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)

    def load(self, path: str | Path, collection: RecipeCollection) -> int:
        self.paths.append(str(path))
        for recipe in self.recipes:
            collection.add_recipe(recipe)
        return len(self.recipes)


@dataclass
class StaticFridgeLoader(FridgeLoader):
    """Fridge loader that stocks a fixed list of items."""

    items: list[FridgeIngredient] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)

    def load(self, path: str | Path, fridge: Fridge) -> int:
        self.paths.append(str(path))
        for item in self.items:
            fridge.add_item(item)
        return len(self.items)


def make_collection(*recipes: Recipe) -> RecipeCollection:
    collection = RecipeCollection()
    for recipe in recipes:
        collection.add_recipe(recipe)
    return collection


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def fridge(clock: FixedClock) -> Fridge:
    return Fridge(clock=clock)


@pytest.fixture
def settings() -> Settings:
    return Settings(today=TODAY)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
