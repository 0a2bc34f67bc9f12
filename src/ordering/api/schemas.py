"""Pydantic request/response schemas for the Orders API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordering.order.line_items import LineItemError, parse_line_items


def _line_items(value):
    """Decode line items when possible; unreadable payloads are kept as sent."""
    if value is None:
        return None
    try:
        return parse_line_items(value)
    except LineItemError:
        return value


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "fecha_pedido": "2025-03-14T18:22:05Z",
                    "cliente_tienda": "sess-8f2c1d",
                    "nombre_cliente": "María López",
                    "array_pedido": [
                        {"codigo_int": "MES-0042", "descripcion_corta": "Mesa de living", "cantidad": 1, "precio": 1600}
                    ],
                    "contacto_cliente": "+54 9 387 555-1234",
                    "mensaje_cliente": "Entregar por la tarde",
                }
            ]
        },
    )

    fecha_pedido: datetime | None = None
    cliente_tienda: str = Field(..., min_length=1)
    nombre_cliente: str | None = None
    array_pedido: Any = Field(...)
    contacto_cliente: str | None = None
    mensaje_cliente: str | None = None

    @field_validator("array_pedido", mode="before")
    @classmethod
    def parse_items(cls, value):
        if value is None:
            raise ValueError("array_pedido is required")
        return _line_items(value)


class UpdateOrderRequest(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "mensaje_cliente": "Mejor por la mañana",
                    "contacto_cliente": "+54 9 387 555-9876",
                }
            ]
        },
    )

    array_pedido: Any = None
    mensaje_cliente: str | None = None
    contacto_cliente: str | None = None
    nombre_cliente: str | None = None

    @field_validator("array_pedido", mode="before")
    @classmethod
    def parse_items(cls, value):
        return _line_items(value)


class OrderRef(BaseModel):
    id: int


class OrderIdResponse(BaseModel):
    data: OrderRef


class OrderResponse(BaseModel):
    id: int
    fecha_pedido: datetime | None = None
    cliente_tienda: str
    nombre_cliente: str | None = None
    array_pedido: Any = None
    contacto_cliente: str | None = None
    mensaje_cliente: str | None = None


class LatestOrderResponse(BaseModel):
    id: int
    fecha_pedido: datetime | None = None
