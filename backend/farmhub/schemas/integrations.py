"""Schemas for weather, location and the farming assistant"""
from pydantic import BaseModel, Field
from typing import Optional


class WeatherResponse(BaseModel):
    location: str
    temperature_c: float
    feels_like_c: float
    humidity: int
    wind_kph: float
    description: str
    icon: Optional[str] = None
    visibility_km: Optional[float] = None
    pressure_mb: Optional[float] = None


class LocationResponse(BaseModel):
    latitude: float
    longitude: float
    city: Optional[str] = None
    country: Optional[str] = None
    display_name: Optional[str] = None
    label: str = Field(..., description="Human readable location")


class LocationSearchResponse(BaseModel):
    query: str
    latitude: float
    longitude: float
    display_name: Optional[str] = None
    map_embed_url: str = Field(..., description="OpenStreetMap embeddable view centred on the match")
    map_link_url: str


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=2000)


class ChatResponse(BaseModel):
    reply: str
