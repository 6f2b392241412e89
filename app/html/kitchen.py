from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from domain.pantry import MIN_INGREDIENTS, Pantry


class KitchenView:
    """Renders a `Pantry` as the full page or as one of its htmx partials."""

    def __init__(
        self,
        pantry: Pantry,
        *,
        environment: Environment,
        page_template: str = "index.html",
        kitchen_template: str = "kitchen.html",
        recipe_template: str = "recipe.html",
    ) -> None:
        self.pantry = pantry
        self.env = environment
        self.page_template = page_template
        self.kitchen_template = kitchen_template
        self.recipe_template = recipe_template

    @property
    def ingredients(self) -> list[str]:
        return self.pantry.ingredients

    @property
    def min_ingredients(self) -> int:
        return MIN_INGREDIENTS

    @property
    def button_disabled(self) -> bool:
        return not self.pantry.can_request_recipe

    @property
    def show_recipe_section(self) -> bool:
        p = self.pantry
        return bool(p.is_loading or p.recipe or p.error)

    @property
    def show_guidance(self) -> bool:
        p = self.pantry
        return not (p.is_loading or p.error or p.recipe) and p.ready

    @property
    def title(self) -> str:
        if self.pantry.recipe is None:
            return "Chef Mistral"
        return f"Chef Mistral | {self.pantry.recipe.title}"

    @property
    def recipe_html(self) -> Markup | None:
        if self.pantry.recipe is None or self.pantry.error:
            return None
        return Markup(self.pantry.recipe.html)

    def _render(self, name: str, **context: Any) -> str:
        return self.env.get_template(name).render(view=self, **context)

    def page(self) -> str:
        return self._render(self.page_template)

    def kitchen(self) -> str:
        """The kitchen plus an out of band swap of the guidance."""
        return self._render(self.kitchen_template, oob=True)

    def recipe_section(self) -> str:
        return self._render(self.recipe_template)
