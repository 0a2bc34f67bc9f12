"""Persistence for store orders (``pedidostienda``).

Orders are created once by checkout and then patched field by field. Only
fields sent with a non-null value overwrite what is stored; there is no
optimistic locking, the last write wins.
"""

from datetime import UTC, datetime

import structlog
from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from shared.db import connection
from shared.errors import NotFound
from shared.tables import pedidostienda

logger = structlog.get_logger(__name__)

CREATE_FIELDS = (
    "fecha_pedido",
    "cliente_tienda",
    "nombre_cliente",
    "array_pedido",
    "contacto_cliente",
    "mensaje_cliente",
)
UPDATABLE_FIELDS = ("array_pedido", "mensaje_cliente", "contacto_cliente", "nombre_cliente")


class OrderRepository:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def create(self, fields: dict) -> int:
        values = {name: fields.get(name) for name in CREATE_FIELDS}
        if values["fecha_pedido"] is None:
            values["fecha_pedido"] = datetime.now(UTC)

        async with connection(self.engine, write=True) as conn:
            result = await conn.execute(insert(pedidostienda).values(**values))
            order_id = result.inserted_primary_key[0]

        logger.info("Order created", order_id=order_id, cliente_tienda=values["cliente_tienda"])
        return order_id

    async def get(self, order_id: int) -> dict:
        query = select(pedidostienda).where(pedidostienda.c.id == order_id)
        async with connection(self.engine) as conn:
            row = (await conn.execute(query)).mappings().first()
        if row is None:
            raise NotFound(f"Pedido {order_id} no encontrado")
        return dict(row)

    async def latest_for_client(self, cliente_tienda: str) -> dict | None:
        """Id and timestamp of the client's most recent order, or None."""
        t = pedidostienda.c
        query = (
            select(t.id, t.fecha_pedido)
            .where(t.cliente_tienda == cliente_tienda)
            .order_by(t.fecha_pedido.desc().nulls_last(), t.id.desc())
            .limit(1)
        )
        async with connection(self.engine) as conn:
            row = (await conn.execute(query)).mappings().first()
        return dict(row) if row is not None else None

    async def update(self, order_id: int, fields: dict) -> int:
        changes = {name: fields[name] for name in UPDATABLE_FIELDS if fields.get(name) is not None}

        async with connection(self.engine, write=True) as conn:
            if changes:
                result = await conn.execute(
                    update(pedidostienda).where(pedidostienda.c.id == order_id).values(**changes)
                )
                found = result.rowcount > 0
            else:
                query = select(pedidostienda.c.id).where(pedidostienda.c.id == order_id)
                found = (await conn.execute(query)).first() is not None

        if not found:
            raise NotFound(f"Pedido {order_id} no encontrado")

        logger.info("Order updated", order_id=order_id, fields=sorted(changes))
        return order_id
