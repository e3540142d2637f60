from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Any, List, Optional

_RECIPE_KEYS = ("id", "nombre", "ingredientes", "instrucciones")


class Recipe(BaseModel):
    id: int
    name: str = Field("", alias="nombre")
    ingredients: str = Field("", alias="ingredientes")
    instructions: str = Field("", alias="instrucciones")

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, data: Any) -> Any:
        # Upstream field names are matched case-insensitively.
        if not isinstance(data, dict):
            return data
        normalized = dict(data)
        for key, value in data.items():
            if isinstance(key, str) and key.lower() in _RECIPE_KEYS:
                normalized[key.lower()] = value
        return normalized

    @field_validator("name", "ingredients", "instructions", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    results: List[Recipe] = Field(default_factory=list, alias="Resultados")
    is_recommendation: bool = Field(..., alias="EsRecomendacion")
    message: str = Field(..., alias="MensajeBusqueda")


class Problem(BaseModel):
    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
