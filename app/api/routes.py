from fastapi import APIRouter, Depends, Response
from typing import List
from app.config import get_settings
from app.schemas.schemas import Recipe, SearchResponse
from app.utils.search import search_recipes
from app.utils.upstream import UpstreamClient, UpstreamError, FetchError, STATUS
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_upstream_client():
    settings = get_settings()
    client = UpstreamClient(settings.flask_api_url, timeout=settings.upstream_timeout)
    try:
        yield client
    finally:
        client.close()


@router.get("/recetas", response_model=List[Recipe], name="GetRecetas")
def get_recipes(client: UpstreamClient = Depends(get_upstream_client)):
    """
    Returns the whole recipe collection from the upstream service.
    Upstream failures keep their status code and carry the upstream body as problem detail.
    """
    result = client.fetch_recipes()
    if isinstance(result, FetchError):
        raise UpstreamError(result)
    return result.recipes


@router.get("/buscar/{termino}", response_model=SearchResponse, name="BuscarRecetas")
def search(termino: str, client: UpstreamClient = Depends(get_upstream_client)):
    """
    Exact substring search over name, ingredients and instructions.
    Falls back to up to five token-overlap recommendations when nothing matches exactly.
    """
    result = client.fetch_recipes()
    if isinstance(result, FetchError):
        if result.kind == STATUS:
            # Non-success upstream status is passed through without a body.
            return Response(status_code=result.status_code)
        raise UpstreamError(result)
    return search_recipes(result.recipes, termino)


@router.get("/health")
def health_check():
    return {"status": "healthy"}
