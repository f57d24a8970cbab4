"""Integrations Module - weather, location and farming assistant"""
from fastapi import APIRouter

from .weather import router as weather_router
from .location import router as location_router
from .assistant import router as assistant_router

router = APIRouter(tags=["integrations"])

router.include_router(weather_router)
router.include_router(location_router)
router.include_router(assistant_router)
