import asyncio
import logging
from typing import Iterable

import openai
from openai.types.chat import (
    ChatCompletionMessageParam,
    ChatCompletionSystemMessageParam,
    ChatCompletionUserMessageParam,
)

from domain.errors import RecipeGenerationError
from domain.prompts import RecipePrompt, user_message


logger = logging.getLogger(__name__)


BASE_URL = "https://router.huggingface.co/v1/"
DEFAULT_MODEL = "mistralai/Mistral-7B-Instruct-v0.2"
MAX_TOKENS = 1000
TEMPERATURE = 0.7
TIMEOUT = 60 * 2

FAILED_MESSAGE = "Failed to generate recipe. Please try again."

# The client refuses an empty key. This one fails at the api instead.
MISSING_TOKEN = "hf_missing"


def openai_client_factory(
    token: str | None = None,
    *,
    base_url: str = BASE_URL,
    max_retries: int = 2,
) -> openai.AsyncClient:
    return openai.AsyncClient(
        api_key=token or MISSING_TOKEN,
        base_url=base_url,
        timeout=TIMEOUT,
        max_retries=max_retries,
    )


class LLMService:
    def __init__(
        self,
        openai_client: openai.AsyncClient | None = None,
        *,
        model: str = DEFAULT_MODEL,
        max_tokens: int = MAX_TOKENS,
        temperature: float = TEMPERATURE,
        prompt: RecipePrompt | None = None,
    ) -> None:
        self.openai_client = (
            openai_client_factory() if openai_client is None else openai_client
        )
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.prompt = RecipePrompt() if prompt is None else prompt

    def messages(self, ingredients: Iterable[str]) -> list[ChatCompletionMessageParam]:
        system_message: ChatCompletionSystemMessageParam = {
            "role": "system",
            "content": str(self.prompt),
        }
        text_message: ChatCompletionUserMessageParam = {
            "role": "user",
            "content": user_message(ingredients),
        }
        return [system_message, text_message]

    async def recipe_from_ingredients(self, ingredients: Iterable[str]) -> str:
        """Ask the model for a markdown recipe using `ingredients`."""
        messages = self.messages(ingredients)
        try:
            resp = await self.openai_client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
            content = resp.choices[0].message.content
        except (openai.OpenAIError, IndexError) as e:
            logger.exception("Error generating recipe.")
            raise RecipeGenerationError(FAILED_MESSAGE) from e

        if not content:
            logger.error("Empty completion from %s.", self.model)
            raise RecipeGenerationError(FAILED_MESSAGE)

        return content

    async def close(self) -> None:
        await self.openai_client.close()


async def main() -> None:
    from rich import print

    from app.config import Config
    from app.logs import configure_logging

    config = Config()
    configure_logging(config.log_level)
    llm = LLMService(
        openai_client_factory(config.hf_token, base_url=config.llm_base_url),
        model=config.llm_model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )

    while True:
        qu = input("Ingredients: ")
        if qu.lower() in ("q", "quit", "exit"):
            break
        ingredients = [i.strip() for i in qu.split(",") if i.strip()]
        if not ingredients:
            continue
        try:
            print(await llm.recipe_from_ingredients(ingredients))
        except RecipeGenerationError as e:
            print(f"[red]{e}[/red]")
        print()

    await llm.close()


if __name__ == "__main__":
    asyncio.run(main())
