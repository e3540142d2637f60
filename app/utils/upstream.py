import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

import requests
from pydantic import TypeAdapter, ValidationError

from app.schemas.schemas import Recipe

logger = logging.getLogger(__name__)

CONNECTION = "connection"
STATUS = "status"
INVALID_PAYLOAD = "invalid_payload"

_recipe_list = TypeAdapter(List[Recipe])


@dataclass
class FetchOk:
    recipes: List[Recipe] = field(default_factory=list)


@dataclass
class FetchError:
    kind: str
    status_code: int
    detail: Optional[str] = None


FetchResult = Union[FetchOk, FetchError]


class UpstreamClient:
    """Reads the full recipe collection from the upstream recipe service."""

    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self):
        self.session.close()

    @property
    def recipes_url(self) -> str:
        return f"{self.base_url}/recetas"

    def fetch_recipes(self) -> FetchResult:
        """
        GET {base_url}/recetas and decode the body into Recipe models.
        Never raises for network or upstream failures; they come back as FetchError.
        """
        url = self.recipes_url
        logger.debug("Fetching recipes from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Could not reach upstream at %s: %s", url, e)
            return FetchError(CONNECTION, 500, f"Error connecting to recipe service: {e}")

        if not 200 <= response.status_code < 300:
            logger.warning("Upstream %s answered %s", url, response.status_code)
            return FetchError(STATUS, response.status_code, response.text or None)

        if not response.content.strip():
            return FetchOk([])
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Upstream %s returned a non-JSON body: %s", url, e)
            return FetchError(INVALID_PAYLOAD, 500, "Recipe service returned invalid JSON")

        if payload is None:
            return FetchOk([])
        try:
            recipes = _recipe_list.validate_python(payload)
        except ValidationError as e:
            logger.warning("Upstream %s returned malformed recipes: %s", url, e)
            return FetchError(INVALID_PAYLOAD, 500, f"Recipe service returned malformed recipes: {e.error_count()} error(s)")
        logger.debug("Fetched %d recipes", len(recipes))
        return FetchOk(recipes)


_TITLES = {
    CONNECTION: "Connection error",
    STATUS: "Upstream error",
    INVALID_PAYLOAD: "Bad upstream data",
}


class UpstreamError(Exception):
    def __init__(self, error: FetchError):
        super().__init__(error.detail or error.kind)
        self.error = error

    @property
    def title(self) -> str:
        return _TITLES.get(self.error.kind, "Upstream error")
