"""Pydantic request/response schemas for the device check API."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class VerifyDeviceRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"device_id": "tablet-mostrador-01"},
            ]
        }
    }

    device_id: str | None = Field(None, validation_alias=AliasChoices("device_id", "deviceId"))


class VerifyDeviceResponse(BaseModel):
    autorizado: bool
