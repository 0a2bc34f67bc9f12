"""Free-text search predicates for catalogue listings.

Search text is split into tokens; an entity matches when every token is a
case-insensitive substring of at least one of two text columns. Token values
are always bound parameters.
"""

import re

from sqlalchemy import ColumnElement, Select, and_, func, or_, select

from shared.tables import categorias, mercaderia

VISIBLE_FLAGS = ("mostrar", "show")
MERCHANDISE_ROW_CAP = 1000

_TOKEN_SEPARATORS = re.compile(r"[,\s]+")
_LIKE_ESCAPE = "\\"


def tokenize(text: str | None) -> list[str]:
    """Split on runs of whitespace and/or commas, dropping empty tokens."""
    if not text:
        return []
    return [token for token in _TOKEN_SEPARATORS.split(text.strip()) if token]


def search_text(buscar: str | None, grcat: str | None) -> str | None:
    """Pick the text to search for: ``buscar`` first, then the category label."""
    for candidate in (buscar, grcat):
        if candidate and candidate.strip():
            return candidate.strip()
    return None


def _contains_pattern(token: str) -> str:
    escaped = token.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2).replace("%", r"\%").replace("_", r"\_")
    return f"%{escaped}%"


def visibility_predicate(column) -> ColumnElement[bool]:
    return func.lower(func.coalesce(column, "")).in_(VISIBLE_FLAGS)


def token_predicates(tokens: list[str], first_column, second_column) -> list[ColumnElement[bool]]:
    """One OR-predicate per token across the two columns; callers AND them."""
    predicates = []
    for token in tokens:
        pattern = _contains_pattern(token)
        predicates.append(
            or_(
                func.coalesce(first_column, "").ilike(pattern, escape=_LIKE_ESCAPE),
                func.coalesce(second_column, "").ilike(pattern, escape=_LIKE_ESCAPE),
            )
        )
    return predicates


def merchandise_query(buscar: str | None = None, grcat: str | None = None) -> Select:
    m = mercaderia.c
    conditions = [visibility_predicate(m.visibilidad)]
    conditions.extend(token_predicates(tokenize(search_text(buscar, grcat)), m.palabrasclave2, m.descripcion_corta))

    return (
        select(
            m.id,
            m.codigo_int,
            m.descripcion_corta,
            m.imagen1,
            m.imagearray,
            m.costosiniva,
            m.iva,
            m.margen,
            m.grupo,
            m.fechaordengrupo,
        )
        .where(and_(*conditions))
        .order_by(
            func.nullif(func.trim(m.grupo), "").asc().nulls_last(),
            func.nullif(func.trim(m.fechaordengrupo), "").desc().nulls_last(),
            m.codigo_int.asc(),
        )
        .limit(MERCHANDISE_ROW_CAP)
    )


def categories_query(palabra: str | None = None) -> Select:
    """Visible categories, optionally narrowed by keyword or subcategory label.

    Ordering is applied in Python by :func:`catalogue.sort_key.sort_categories`.
    """
    c = categorias.c
    conditions = [visibility_predicate(c.visibilidad)]
    conditions.extend(token_predicates(tokenize(palabra), c.palabrasclave, c.subcategoria))
    return select(categorias).where(and_(*conditions))
