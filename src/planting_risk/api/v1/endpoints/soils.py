"""Soil catalog endpoint."""

from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from planting_risk.domain import list_soils
from planting_risk.auth.auth import verify_token

router = APIRouter()


class SoilResponse(BaseModel):
    id: str
    label: str
    drainage_coefficient: float


@router.get("/soils", response_model=List[SoilResponse])
def get_soils(token: str = Depends(verify_token)):
    """List the soil classifications in drainage order (poorest first)."""
    return [
        SoilResponse(id=s.id, label=s.label,
                     drainage_coefficient=s.drainage_coefficient)
        for s in list_soils()
    ]
