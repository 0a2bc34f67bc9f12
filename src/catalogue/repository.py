"""Read-only catalogue queries."""

import structlog
from sqlalchemy.ext.asyncio import AsyncEngine

from catalogue.pricing import price_item
from catalogue.search import categories_query, merchandise_query
from catalogue.sort_key import sort_categories
from shared.db import connection

logger = structlog.get_logger(__name__)


class CatalogueRepository:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def visible_categories(self) -> list[dict]:
        return await self._categories(None)

    async def search_categories(self, palabra: str) -> list[dict]:
        return await self._categories(palabra)

    async def _categories(self, palabra: str | None) -> list[dict]:
        async with connection(self.engine) as conn:
            result = await conn.execute(categories_query(palabra))
            rows = [dict(row) for row in result.mappings()]
        return sort_categories(rows)

    async def merchandise(self, buscar: str | None = None, grcat: str | None = None) -> list[dict]:
        query = merchandise_query(buscar, grcat)
        logger.debug("Merchandise query", sql=" ".join(str(query).split()), buscar=buscar, grcat=grcat)

        async with connection(self.engine) as conn:
            result = await conn.execute(query)
            rows = [price_item(row) for row in result.mappings()]
        return rows
