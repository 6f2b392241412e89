import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import FileResponse, HTMLResponse
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app.config import Config, Env
from app.html.kitchen import KitchenView
from app.logs import configure_logging
from domain.llm_service import LLMService, openai_client_factory
from domain.pantry import Pantry, RecipeGenerator


logger = logging.getLogger(__name__)


CONFIG = Config()


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def is_htmx(request: Request) -> bool:
    return request.headers.get("HX-Request", "").lower() == "true"


def view(pantry: Pantry) -> KitchenView:
    return KitchenView(pantry, environment=TEMPLATES)


async def favicon(request: Request) -> FileResponse:
    return FileResponse(CONFIG.images_dir / "favicon.svg", media_type="image/svg+xml")


@aHTMLResponse
async def homepage(request: Request) -> str:
    return view(Pantry()).page()


@aHTMLResponse
async def add_ingredient(request: Request) -> str:
    async with request.form() as form:
        pantry = Pantry.from_form(str(i) for i in form.getlist("ingredients"))
        ingredient = str(form.get("ingredient", ""))

    if not pantry.add_ingredient(ingredient):
        logger.debug("Rejected blank ingredient.")

    if is_htmx(request):
        return view(pantry).kitchen()
    return view(pantry).page()


@aHTMLResponse
async def get_recipe(request: Request) -> str:
    async with request.form() as form:
        pantry = Pantry.from_form(str(i) for i in form.getlist("ingredients"))

    await pantry.request_recipe(request.app.state.llm)

    if is_htmx(request):
        return view(pantry).recipe_section()
    return view(pantry).page()


def llm_from_config(config: Config) -> LLMService:
    if not config.hf_token:
        logger.warning("HF_TOKEN is not set. Recipe requests will fail.")
    return LLMService(
        openai_client_factory(
            config.hf_token,
            base_url=config.llm_base_url,
            max_retries=config.llm_max_retries,
        ),
        model=config.llm_model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )


def create_app(
    llm: RecipeGenerator | None = None,
    config: Config | None = None,
) -> Starlette:
    """`llm` defaults to an `LLMService` built from `config`."""
    config = CONFIG if config is None else config
    configure_logging(config.log_level)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        yield
        close = getattr(app.state.llm, "close", None)
        if close is not None:
            await close()

    app = Starlette(
        debug=True if config.env == Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/ingredients", add_ingredient, methods=["POST"]),
            Route("/recipe", get_recipe, methods=["POST"]),
            Route("/favicon.ico", favicon),
            Mount("/assets", StaticFiles(directory=config.assets_dir), name="assets"),
        ],
        lifespan=lifespan,
    )

    app.state.llm = llm_from_config(config) if llm is None else llm
    return app


app = create_app()
