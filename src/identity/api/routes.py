"""FastAPI route for the admin device check."""

from fastapi import APIRouter, Depends

from identity.api.schemas import VerifyDeviceRequest, VerifyDeviceResponse
from identity.devices import AdminDeviceRegistry
from shared.db import get_engine
from shared.errors import ValidationError

router = APIRouter(prefix="/api", tags=["identity"])


def get_device_registry() -> AdminDeviceRegistry:
    return AdminDeviceRegistry(get_engine())


@router.post("/verificar-dispositivo", response_model=VerifyDeviceResponse)
async def verify_device(
    body: VerifyDeviceRequest,
    registry: AdminDeviceRegistry = Depends(get_device_registry),
) -> VerifyDeviceResponse:
    if not body.device_id or not body.device_id.strip():
        raise ValidationError("Device ID requerido")
    return VerifyDeviceResponse(autorizado=await registry.is_authorized(body.device_id.strip()))
