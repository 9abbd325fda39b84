from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parents[1]
REPO_ROOT = PACKAGE_DIR.parent
ENV_FILES = [REPO_ROOT / ".env", Path.cwd() / ".env"]

for env_path in ENV_FILES:
    if env_path.exists():
        load_dotenv(env_path, override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="allow", populate_by_name=True)

    app_name: str = Field(default="pyeza", alias="PYEZA_APP_NAME")

    # Pagination
    default_page_size: int = Field(default=25, alias="PYEZA_DEFAULT_PAGE_SIZE")
    max_page_size: int = Field(default=100, alias="PYEZA_MAX_PAGE_SIZE")
    default_sort_direction: Literal["asc", "desc"] = Field(default="asc", alias="PYEZA_DEFAULT_SORT_DIRECTION")

    # Table cells
    chip_max_visible: int = Field(default=3, alias="PYEZA_CHIP_MAX_VISIBLE")

    log_level: str = Field(default="INFO", alias="PYEZA_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if settings.default_page_size < 1:
        raise RuntimeError("PYEZA_DEFAULT_PAGE_SIZE must be a positive integer")
    if settings.max_page_size < settings.default_page_size:
        raise RuntimeError("PYEZA_MAX_PAGE_SIZE must not be smaller than PYEZA_DEFAULT_PAGE_SIZE")
    if settings.chip_max_visible < 0:
        raise RuntimeError("PYEZA_CHIP_MAX_VISIBLE must not be negative")
    return settings
