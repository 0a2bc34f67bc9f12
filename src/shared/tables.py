"""Table definitions for the storefront database.

Catalogue tables and the admin allow-list are owned by the back-office
process; this service only reads them. ``pedidostienda`` is written here.
"""

from sqlalchemy import JSON, Column, DateTime, Integer, MetaData, Numeric, Table, Text

metadata = MetaData()

categorias = Table(
    "categorias",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("grupo", Text),
    Column("subcategoria", Text),
    Column("imagen", Text),
    Column("catcat", Text),
    Column("visibilidad", Text),
    Column("palabrasclave", Text),
)

mercaderia = Table(
    "mercaderia",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("codigo_int", Text),
    Column("descripcion_corta", Text),
    Column("imagen1", Text),
    Column("imagearray", JSON),
    Column("costosiniva", Numeric(14, 2)),
    Column("iva", Numeric(6, 2)),
    Column("margen", Numeric(6, 2)),
    Column("grupo", Text),
    Column("fechaordengrupo", Text),
    Column("visibilidad", Text),
    Column("palabrasclave2", Text),
)

pedidostienda = Table(
    "pedidostienda",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("fecha_pedido", DateTime(timezone=True)),
    Column("cliente_tienda", Text, nullable=False, index=True),
    Column("nombre_cliente", Text),
    Column("array_pedido", JSON),
    Column("contacto_cliente", Text),
    Column("mensaje_cliente", Text),
)

usuarios_admin = Table(
    "usuarios_admin",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("nombre_usuario", Text, nullable=False, unique=True),
)
