from fastapi import APIRouter
from planting_risk.api.v1.endpoints import assess, soils, weather

api_router = APIRouter()
api_router.include_router(soils.router, prefix="", tags=["soils"])
api_router.include_router(assess.router, prefix="", tags=["assess"])
api_router.include_router(weather.router, prefix="", tags=["weather"])
