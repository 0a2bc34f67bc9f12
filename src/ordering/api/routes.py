"""FastAPI routes for store orders (pedidos)."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from notifications.dispatch import notify_new_order
from ordering.api.schemas import (
    CreateOrderRequest,
    LatestOrderResponse,
    OrderIdResponse,
    OrderRef,
    OrderResponse,
    UpdateOrderRequest,
)
from ordering.order.repository import OrderRepository
from shared.config import Settings
from shared.db import get_engine
from shared.errors import NotFound

router = APIRouter(prefix="/api/pedidos", tags=["pedidos"])


def get_order_repository() -> OrderRepository:
    return OrderRepository(get_engine())


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("", response_model=OrderIdResponse)
async def create_order(
    body: CreateOrderRequest,
    background_tasks: BackgroundTasks,
    repo: OrderRepository = Depends(get_order_repository),
    settings: Settings = Depends(get_app_settings),
) -> OrderIdResponse:
    order_id = await repo.create(body.model_dump())

    # Runs after the response is sent; its failures are logged only.
    background_tasks.add_task(notify_new_order, order_id, body.array_pedido, body.contacto_cliente, settings)

    return OrderIdResponse(data=OrderRef(id=order_id))


@router.get("/cliente/{cliente_id}", response_model=LatestOrderResponse)
async def get_latest_order_for_client(
    cliente_id: str,
    repo: OrderRepository = Depends(get_order_repository),
):
    latest = await repo.latest_for_client(cliente_id)
    if latest is None:
        raise NotFound("No se encontró pedido")
    return latest


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, repo: OrderRepository = Depends(get_order_repository)):
    return await repo.get(order_id)


@router.patch("/{order_id}", response_model=OrderIdResponse)
async def update_order(
    order_id: int,
    body: UpdateOrderRequest,
    repo: OrderRepository = Depends(get_order_repository),
) -> OrderIdResponse:
    updated_id = await repo.update(order_id, body.model_dump(exclude_none=True))
    return OrderIdResponse(data=OrderRef(id=updated_id))
