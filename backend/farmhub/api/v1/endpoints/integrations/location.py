"""Geocoding endpoints: place search with map links and reverse lookup"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from farmhub.api.auth import get_optional_user_context
from farmhub.core.context import UserContext
from farmhub.core.database import get_db
from farmhub.models import UserProfile
from farmhub.schemas import LocationResponse, LocationSearchResponse
from farmhub.services.geocoding import (
    Geocoder,
    GeocodingUnavailable,
    location_string,
    map_embed_url,
    map_link_url,
    reverse_geocode,
    search_location,
)

router = APIRouter()


def get_geocoder() -> Geocoder:
    return Geocoder()


def _profile_location(context: UserContext, db: Session) -> Optional[str]:
    if not context.is_authenticated:
        return None
    return (
        db.query(UserProfile.location)
        .filter(UserProfile.id == context.user_id)
        .scalar()
    )


@router.get("/location/search", response_model=LocationSearchResponse)
async def search(
    q: Optional[str] = Query(None, max_length=200, description="Place name; defaults to the profile location"),
    context: UserContext = Depends(get_optional_user_context),
    geocoder: Geocoder = Depends(get_geocoder),
    db: Session = Depends(get_db),
):
    query = (q or "").strip() or (_profile_location(context, db) or "").strip()
    if not query:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No location to search for")
    try:
        data = await search_location(query, geocoder)
    except GeocodingUnavailable as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    if data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Location not found")
    return LocationSearchResponse(
        query=query,
        latitude=data.latitude,
        longitude=data.longitude,
        display_name=data.display_name,
        map_embed_url=map_embed_url(data.latitude, data.longitude),
        map_link_url=map_link_url(data.latitude, data.longitude),
    )


@router.get("/location/reverse", response_model=LocationResponse)
async def reverse_location(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    geocoder: Geocoder = Depends(get_geocoder),
):
    data = await reverse_geocode(lat, lon, geocoder)
    return LocationResponse(
        latitude=data.latitude,
        longitude=data.longitude,
        city=data.city,
        country=data.country,
        display_name=data.display_name,
        label=location_string(data),
    )
