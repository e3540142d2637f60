import logging
import re
from typing import List

from app.schemas.schemas import Recipe, SearchResponse

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

_SEPARATORS = re.compile(r"[ ,.;]")


def tokenize(term: str) -> List[str]:
    """Split a search term on space, comma, period and semicolon, dropping empty pieces."""
    return [token for token in _SEPARATORS.split(term) if token]


def are_similar(text: str, term: str) -> bool:
    """True when any token of `term` appears in `text`, ignoring case."""
    haystack = text.lower()
    return any(token.lower() in haystack for token in tokenize(term))


def _fields(recipe: Recipe):
    return (recipe.name, recipe.ingredients, recipe.instructions)


def matches_exactly(recipe: Recipe, term: str) -> bool:
    needle = term.lower()
    return any(needle in text.lower() for text in _fields(recipe))


def is_recommendation(recipe: Recipe, term: str) -> bool:
    return any(are_similar(text, term) for text in _fields(recipe))


def search_recipes(recipes: List[Recipe], term: str, limit: int = MAX_RECOMMENDATIONS) -> SearchResponse:
    """
    Exact substring matches first. If there are none, fall back to up to `limit`
    recipes sharing at least one token with the term, in upstream order.
    """
    recipes = recipes or []
    exact = [r for r in recipes if matches_exactly(r, term)]
    if exact:
        logger.info("Search %r: %d exact result(s)", term, len(exact))
        return SearchResponse(
            results=exact,
            is_recommendation=False,
            message=f"Resultados para '{term}':",
        )

    recommendations = [r for r in recipes if is_recommendation(r, term)][:limit]
    logger.info("Search %r: no exact results, %d recommendation(s)", term, len(recommendations))
    return SearchResponse(
        results=recommendations,
        is_recommendation=True,
        message=f"No se encontraron resultados exactos para '{term}'. Aquí hay algunas recomendaciones:",
    )
