class RecipeError(Exception):
    pass


class RecipeGenerationError(RecipeError):
    """The chat completion api could not produce a recipe."""


class RecipeRequestInProgress(RecipeError):
    """A recipe is already being generated for this pantry."""
