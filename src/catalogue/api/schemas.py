"""Pydantic response schemas for the Catalogue API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CategoryResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 7,
                    "grupo": "Hogar",
                    "subcategoria": "Bazar",
                    "imagen": "https://cdn.example.com/categorias/hogar.jpg",
                    "catcat": "Cat. 3 - Hogar",
                    "visibilidad": "mostrar",
                    "palabrasclave": "hogar bazar cocina",
                }
            ]
        }
    }

    id: int
    grupo: str | None = None
    subcategoria: str | None = None
    imagen: str | None = None
    catcat: str | None = None
    visibilidad: str | None = None
    palabrasclave: str | None = None


class MerchandiseResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1203,
                    "codigo_int": "MES-0042",
                    "descripcion_corta": "Mesa de living color rojo",
                    "imagen1": "https://cdn.example.com/mercaderia/mes-0042.jpg",
                    "imagearray": ["https://cdn.example.com/mercaderia/mes-0042-2.jpg"],
                    "costosiniva": 1000.0,
                    "iva": 21.0,
                    "margen": 30.0,
                    "grupo": "Muebles",
                    "fechaordengrupo": "2024-05-01",
                    "precio": 1600,
                }
            ]
        }
    }

    id: int
    codigo_int: str | None = None
    descripcion_corta: str | None = None
    imagen1: str | None = None
    imagearray: Any = None
    costosiniva: float | None = None
    iva: float | None = None
    margen: float | None = None
    grupo: str | None = None
    fechaordengrupo: str | None = None
    precio: int
