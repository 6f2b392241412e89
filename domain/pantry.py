import logging
from typing import Iterable, Protocol, Self

from domain.errors import RecipeGenerationError, RecipeRequestInProgress
from domain.models import Recipe


logger = logging.getLogger(__name__)


MIN_INGREDIENTS = 4

NO_INGREDIENTS = "Please add some ingredients first!"
NOT_ENOUGH_INGREDIENTS = (
    f"Please add at least {MIN_INGREDIENTS} ingredients to get a recipe."
)
FAILED_TO_LOAD = "Failed to load recipe. Please try again."


class RecipeGenerator(Protocol):
    async def recipe_from_ingredients(self, ingredients: Iterable[str]) -> str:
        ...


class Pantry:
    """The ingredients on hand and the state of the one recipe request."""

    @classmethod
    def from_form(cls, values: Iterable[str]) -> Self:
        pantry = cls()
        for value in values:
            pantry.add_ingredient(value)
        return pantry

    def __init__(self, ingredients: Iterable[str] | None = None) -> None:
        self.ingredients: list[str] = []
        self.recipe: Recipe | None = None
        self.is_loading = False
        self.error: str | None = None
        for ingredient in [] if ingredients is None else ingredients:
            self.add_ingredient(ingredient)

    def __repr__(self) -> str:
        return f"<Pantry(ingredients={self.ingredients})>"

    def __len__(self) -> int:
        return len(self.ingredients)

    def add_ingredient(self, text: str | None) -> bool:
        """Add `text` trimmed. Blank text is rejected."""
        ingredient = (text or "").strip()
        if not ingredient:
            return False
        self.ingredients.append(ingredient)
        return True

    @property
    def ready(self) -> bool:
        return len(self.ingredients) >= MIN_INGREDIENTS

    @property
    def can_request_recipe(self) -> bool:
        return self.ready and not self.is_loading

    def _fail(self, message: str) -> None:
        self.error = message
        self.recipe = None

    async def request_recipe(self, generator: RecipeGenerator) -> Recipe | None:
        if not self.ingredients:
            self._fail(NO_INGREDIENTS)
            return None

        if not self.ready:
            self._fail(NOT_ENOUGH_INGREDIENTS)
            return None

        if self.is_loading:
            raise RecipeRequestInProgress("Already generating a recipe.")

        self.is_loading = True
        self.error = None
        self.recipe = None

        try:
            content = await generator.recipe_from_ingredients(list(self.ingredients))
        except RecipeGenerationError:
            logger.error("Failed to fetch recipe for %s.", self.ingredients)
            self._fail(FAILED_TO_LOAD)
        else:
            self.recipe = Recipe(content)
        finally:
            self.is_loading = False

        return self.recipe
