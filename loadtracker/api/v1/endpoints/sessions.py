"""
Training session endpoints.

Logging accepts the raw record as submitted by a form: numeric fields may
arrive as strings and are parsed by the variant schema.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from loadtracker.api.dependencies import get_session_service
from loadtracker.core.config import settings
from loadtracker.core.errors import SessionValidationError
from loadtracker.schemas.session import (
    GymSession,
    GymSessionCreate,
    RecentSessionRow,
    SessionRecord,
    TrackSession,
    TrackSessionCreate,
)
from loadtracker.services.session_service import SessionService

router = APIRouter()


def _request_body(model) -> dict:
    # The service validates the raw body; this only documents its shape.
    return {"requestBody": {"required": True, "content": {"application/json": {"schema": model.model_json_schema()}}}}


@router.post("/track", summary="Log a track / throwing session.", response_model=TrackSession,
             status_code=status.HTTP_201_CREATED, openapi_extra=_request_body(TrackSessionCreate), )
def log_track_session(payload: dict[str, Any] = Body(...),
                      service: SessionService = Depends(get_session_service), ):
    try:
        return service.log_track(payload)
    except SessionValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail={ "message": e.message, "errors": e.errors }, )


@router.post("/gym", summary="Log a gym / strength session.", response_model=GymSession,
             status_code=status.HTTP_201_CREATED, openapi_extra=_request_body(GymSessionCreate), )
def log_gym_session(payload: dict[str, Any] = Body(...), service: SessionService = Depends(get_session_service), ):
    try:
        return service.log_gym(payload)
    except SessionValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail={ "message": e.message, "errors": e.errors }, )


@router.get("/recent", summary="List the most recent sessions.", response_model=list[RecentSessionRow], )
def list_recent_sessions(limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum rows"),
                         service: SessionService = Depends(get_session_service), ):
    return service.recent(limit or settings.RECENT_SESSIONS_LIMIT)


@router.get("", summary="List all stored sessions.", response_model=list[SessionRecord], )
def list_sessions(service: SessionService = Depends(get_session_service)):
    return list(service.store.snapshot())
