"""Current weather endpoint"""
from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from farmhub.api.auth import get_optional_user_context
from farmhub.core.config import settings
from farmhub.core.context import UserContext
from farmhub.core.database import get_db
from farmhub.models import UserProfile
from farmhub.schemas import WeatherResponse
from farmhub.services.weather import WeatherClient, WeatherUnavailable

router = APIRouter()


def get_weather_client() -> WeatherClient:
    return WeatherClient()


def _default_location(context: UserContext, db: Session) -> str:
    if context.is_authenticated:
        location = (
            db.query(UserProfile.location)
            .filter(UserProfile.id == context.user_id)
            .scalar()
        )
        if location:
            return location
    return settings.DEFAULT_WEATHER_LOCATION


@router.get("/weather", response_model=WeatherResponse)
async def get_weather(
    location: Optional[str] = Query(None, description="City name or 'lat,lon'"),
    context: UserContext = Depends(get_optional_user_context),
    client: WeatherClient = Depends(get_weather_client),
    db: Session = Depends(get_db),
):
    query = (location or "").strip() or _default_location(context, db)
    try:
        report = await client.current(query)
    except WeatherUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return WeatherResponse(**asdict(report))
