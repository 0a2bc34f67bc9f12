"""Admin device allow-list.

Devices are registered out of band in ``usuarios_admin``; this service only
checks membership.
"""

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine

from shared.db import connection
from shared.tables import usuarios_admin

logger = structlog.get_logger(__name__)


class AdminDeviceRegistry:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def is_authorized(self, device_id: str) -> bool:
        query = select(usuarios_admin.c.id).where(usuarios_admin.c.nombre_usuario == device_id).limit(1)
        async with connection(self.engine) as conn:
            row = (await conn.execute(query)).first()

        authorized = row is not None
        if not authorized:
            logger.info("Unknown device rejected", device_id=device_id)
        return authorized
