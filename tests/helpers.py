import json
from typing import Any, Callable, Iterable

import httpx
import openai

from domain.errors import RecipeGenerationError


RECIPE = """# Tomato Basil Pasta

## Ingredients
- Pasta (200 grams)
- Tomatoes (3)

## Instructions
1. Boil the pasta.
2. Toss with **fresh** tomatoes.

## Tips
- Salt the water.
"""


def completion(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "mistralai/Mistral-7B-Instruct-v0.2",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class Recorder:
    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


def fake_openai_client(recorder: Recorder) -> openai.AsyncClient:
    return openai.AsyncClient(
        api_key="hf_test",
        base_url="https://llm.test/v1/",
        max_retries=0,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(recorder)),
    )


class FakeGenerator:
    def __init__(self, content: str = RECIPE, fail: bool = False) -> None:
        self.content = content
        self.fail = fail
        self.calls: list[list[str]] = []

    async def recipe_from_ingredients(self, ingredients: Iterable[str]) -> str:
        self.calls.append(list(ingredients))
        if self.fail:
            raise RecipeGenerationError("Failed to generate recipe. Please try again.")
        return self.content


