"""Catalogue rows shared by repository, API and BDD tests."""

from decimal import Decimal

import pytest
from shared.tables import categorias, mercaderia

CATEGORIES = [
    {
        "id": 1,
        "grupo": "Hogar",
        "subcategoria": "Bazar",
        "imagen": "hogar.jpg",
        "catcat": "Cat. 12 - Hogar",
        "visibilidad": "mostrar",
        "palabrasclave": "hogar cocina vajilla",
    },
    {
        "id": 2,
        "grupo": "Jardín",
        "subcategoria": "Macetas",
        "imagen": "jardin.jpg",
        "catcat": "3,5 Jardín",
        "visibilidad": "MOSTRAR",
        "palabrasclave": "jardin plantas",
    },
    {
        "id": 3,
        "grupo": "Ofertas",
        "subcategoria": "Liquidación",
        "imagen": "ofertas.jpg",
        "catcat": "Sin número",
        "visibilidad": "Show",
        "palabrasclave": "ofertas descuentos cocina",
    },
    {
        "id": 4,
        "grupo": "Depósito",
        "subcategoria": "Interno",
        "imagen": None,
        "catcat": "1",
        "visibilidad": "ocultar",
        "palabrasclave": "cocina",
    },
]

MERCHANDISE = [
    {
        "id": 10,
        "codigo_int": "MES-002",
        "descripcion_corta": "Mesa ratona",
        "imagen1": "mes-002.jpg",
        "imagearray": ["mes-002-b.jpg"],
        "costosiniva": Decimal("1000"),
        "iva": Decimal("21"),
        "margen": Decimal("30"),
        "grupo": "Muebles",
        "fechaordengrupo": "2024-01-10",
        "visibilidad": "mostrar",
        "palabrasclave2": "Mesa de living color Rojo",
    },
    {
        "id": 11,
        "codigo_int": "SIL-001",
        "descripcion_corta": "Silla plegable",
        "imagen1": "sil-001.jpg",
        "imagearray": None,
        "costosiniva": Decimal("500"),
        "iva": None,
        "margen": None,
        "grupo": "Muebles",
        "fechaordengrupo": "2024-03-01",
        "visibilidad": "mostrar",
        "palabrasclave2": "Silla azul",
    },
    {
        "id": 12,
        "codigo_int": "MES-001",
        "descripcion_corta": "Mesa roja de cocina",
        "imagen1": "mes-001.jpg",
        "imagearray": None,
        "costosiniva": Decimal("2000"),
        "iva": Decimal("21"),
        "margen": Decimal("0"),
        "grupo": "Cocina",
        "fechaordengrupo": None,
        "visibilidad": "SHOW",
        "palabrasclave2": None,
    },
    {
        "id": 13,
        "codigo_int": "VAS-001",
        "descripcion_corta": "Vaso rojo",
        "imagen1": None,
        "imagearray": None,
        "costosiniva": None,
        "iva": None,
        "margen": None,
        "grupo": "  ",
        "fechaordengrupo": "",
        "visibilidad": "mostrar",
        "palabrasclave2": "vaso cocina",
    },
    {
        "id": 14,
        "codigo_int": "MES-999",
        "descripcion_corta": "Mesa roja discontinuada",
        "imagen1": None,
        "imagearray": None,
        "costosiniva": Decimal("100"),
        "iva": None,
        "margen": None,
        "grupo": "Muebles",
        "fechaordengrupo": None,
        "visibilidad": "ocultar",
        "palabrasclave2": "Mesa Rojo",
    },
]


@pytest.fixture()
def catalogue_rows(seed):
    seed(categorias, CATEGORIES)
    seed(mercaderia, MERCHANDISE)
