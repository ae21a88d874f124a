from __future__ import annotations

from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.config import API_PREFIX

HEALTH_MESSAGE = "Health check: API is up and running smoothly."

router = APIRouter(
    prefix=API_PREFIX,
    tags=["health"],
)


class HealthEnvelope(BaseModel):
    status: Literal["success"] = "success"
    message: str = Field(..., examples=[HEALTH_MESSAGE])


@router.get(
    "/healthchecker",
    response_model=HealthEnvelope,
    summary="Liveness probe",
    description="Always answers 200; the database is not consulted.",
)
async def health_checker() -> HealthEnvelope:
    return HealthEnvelope(message=HEALTH_MESSAGE)
