from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from matchmaker.utils.court_names import is_hard_court


class Surface(str, Enum):
    GRASS = "grass"
    HARD = "hard"

    @classmethod
    def for_court_name(cls, court_name: str) -> "Surface":
        return cls.HARD if is_hard_court(court_name) else cls.GRASS


class Court(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    surface_type: Surface = Surface.GRASS

    @model_validator(mode="before")
    @classmethod
    def _derive_surface(cls, data: Any) -> Any:
        """Fill surface_type from the court name when the caller leaves it out."""
        if isinstance(data, str):
            data = {"name": data}
        if isinstance(data, dict) and data.get("surface_type") is None:
            data = {**data, "surface_type": Surface.for_court_name(str(data.get("name", "")))}
        return data
