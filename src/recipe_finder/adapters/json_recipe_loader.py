"""JSON loader for recipe collections."""

import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from recipe_finder.domain.ingredients import Ingredient
from recipe_finder.domain.recipes import Recipe, RecipeCollection
from recipe_finder.errors import FileAccessError, ParseError, ValidationError

_logger = logging.getLogger(__name__)


class IngredientPayload(BaseModel):
    """Recipe ingredient entry."""

    item: str = ""
    amount: int | str
    unit: str


class RecipePayload(BaseModel):
    """Recipe entry."""

    name: str = ""
    ingredients: list[IngredientPayload] | None = None


_RECIPE_LIST = TypeAdapter(list[RecipePayload])


@dataclass
class JsonRecipeLoader:
    """Fill a recipe collection from a JSON array of recipes."""

    encoding: str = "utf-8"

    def load(self, path: str | Path, collection: RecipeCollection) -> int:
        """Load a JSON file into the collection and return the recipes added."""
        json_path = Path(path)
        try:
            text = json_path.read_text(encoding=self.encoding)
        except OSError as exc:
            raise FileAccessError(
                f"Cannot open {json_path}. The file does not exist or you do not "
                "have permissions to access it."
            ) from exc
        except UnicodeDecodeError as exc:
            raise ParseError(
                f"JSON file import error: {json_path} is not valid {self.encoding} "
                f"text ({exc.reason} at byte {exc.start})."
            ) from exc
        count = self.load_text(text, collection)
        _logger.info("Loaded %s recipes from %s", count, json_path)
        return count

    def load_text(self, text: str, collection: RecipeCollection) -> int:
        """Add every recipe that lists ingredients, in input order."""
        try:
            payloads = _RECIPE_LIST.validate_json(text)
        except PydanticValidationError as exc:
            raise ParseError(f"JSON file import error: {_describe(exc)}") from exc

        count = 0
        for payload in payloads:
            if not payload.ingredients:
                _logger.debug("Skipping recipe %r without ingredients", payload.name)
                continue
            try:
                recipe = _payload_to_recipe(payload)
            except ValidationError as exc:
                raise ParseError(f"JSON file import error: {exc}") from exc
            collection.add_recipe(recipe)
            count += 1
        return count


def _payload_to_recipe(payload: RecipePayload) -> Recipe:
    recipe = Recipe(payload.name)
    for entry in payload.ingredients or []:
        recipe.add_ingredient(Ingredient(entry.item, entry.amount, entry.unit))
    return recipe


def _describe(exc: PydanticValidationError) -> str:
    """Summarize the first pydantic error as a single line."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{first['msg']} at {location}"
    return first["msg"]
