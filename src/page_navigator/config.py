"""Configuration management for page_navigator using Hydra.

Defaults are loaded from YAML files shipped inside the package under
conf/pagination/ and validated with pydantic before they reach the paginator.
"""

from importlib.resources import files
from pathlib import Path

from hydra import compose, initialize_config_dir
from loguru import logger
from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel, Field, field_validator, model_validator


class PaginationConfig(BaseModel):
    """Defaults applied by the `Paginator` facade.

    Attributes:
        default_page_size: Items per page when the caller gives none
        max_page_size: Largest caller-supplied page size the facade accepts
        items_key: Context key for the page items
        default_edit_id: Edit tag used when the caller gives none
    """

    default_page_size: int = Field(default=10, ge=1, le=1000)
    max_page_size: int = Field(default=100, ge=1)
    items_key: str = "items"
    default_edit_id: str = "None"

    @field_validator("items_key")
    @classmethod
    def validate_items_key(cls, v: str) -> str:
        """Ensure the items key is a usable template variable name."""
        if not v or not v.strip():
            raise ValueError("items_key cannot be empty")
        return v

    @model_validator(mode="after")
    def check_page_size_bounds(self) -> "PaginationConfig":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) must not exceed "
                f"max_page_size ({self.max_page_size})"
            )
        return self


def default_config_dir() -> Path:
    """Directory holding the YAML configs bundled with the package."""
    return Path(str(files("page_navigator") / "conf" / "pagination"))


def load_config(
    config_name: str = "default",
    config_path: str | Path | None = None,
    overrides: list[str] | None = None,
) -> PaginationConfig:
    """Load pagination configuration from Hydra YAML files.

    Args:
        config_name: Name of config file (without .yaml extension)
        config_path: Path to config directory (defaults to the packaged conf/pagination/)
        overrides: List of config overrides (e.g., ["default_page_size=25"])

    Returns:
        Validated configuration object

    Example:
        >>> config = load_config("default", overrides=["default_page_size=25"])
        >>> config.default_page_size
        25
    """
    if config_path is None:
        config_path = default_config_dir()

    config_path = Path(config_path).resolve()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config directory not found: {config_path}\n" f"Create it with: mkdir -p {config_path}"
        )

    with initialize_config_dir(config_dir=str(config_path), version_base=None, job_name="pagination"):
        cfg: DictConfig = compose(config_name=config_name, overrides=overrides or [])

    config_dict = OmegaConf.to_container(cfg, resolve=True)
    logger.debug(f"Loaded pagination config {config_name!r} from {config_path}")
    return PaginationConfig(**config_dict)  # type: ignore


def create_default_config() -> dict[str, object]:
    """Create a default configuration dictionary for bootstrapping.

    Returns:
        Dictionary suitable for writing to YAML

    Example:
        >>> import yaml
        >>> with open("conf/pagination/default.yaml", "w") as f:
        ...     yaml.dump(create_default_config(), f)
    """
    return {
        "default_page_size": 10,
        "max_page_size": 100,
        "items_key": "items",
        "default_edit_id": "None",
    }
