from typing import Iterable


SYSTEM_PROMPT = """
You are a helpful AI chef assistant. Your task is to suggest a recipe based on a list of ingredients provided by the user.
Please format your response in markdown with the following structure:

# [Recipe Name]

## Ingredients
- List all ingredients needed (including quantities)

## Instructions
1. Step-by-step instructions
2. Make it clear and easy to follow

## Tips
- Add any helpful tips or notes about the recipe

Keep the recipe simple and focus on using the ingredients provided. If additional common ingredients are needed, mention them but keep it minimal.
""".strip()


USER_MESSAGE = "Here are my ingredients: {ingredients}. Can you suggest a recipe?"


def user_message(ingredients: Iterable[str]) -> str:
    return USER_MESSAGE.format(ingredients=", ".join(ingredients))


class RecipePrompt:
    def __init__(
        self,
        content: str | None = None,
    ) -> None:
        self.content = SYSTEM_PROMPT if content is None else content

    def __str__(self) -> str:
        return self.content
