from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings

from domain.llm_service import BASE_URL, DEFAULT_MODEL, MAX_TOKENS, TEMPERATURE


ROOT_DIR = Path(__file__).resolve().parent.parent


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    env: Env = Env.local
    assets_dir: Path = ROOT_DIR / "assets"
    html_dir: Path = ROOT_DIR / "assets/html"
    images_dir: Path = ROOT_DIR / "assets/img"
    hf_token: str = ""
    llm_base_url: str = BASE_URL
    llm_model: str = DEFAULT_MODEL
    max_tokens: int = MAX_TOKENS
    temperature: float = TEMPERATURE
    llm_max_retries: int = 2
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
