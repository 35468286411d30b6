"""API v1 routes. Paths are unprefixed to match the website frontend."""

from fastapi import APIRouter

from nonprofit.api.v1 import (
    auth,
    directors,
    events,
    health,
    payments,
    pledges,
    subscribers,
    upload,
    volunteers,
)

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(events.router, tags=["events"])
router.include_router(volunteers.router, tags=["volunteers"])
router.include_router(directors.router, tags=["directors"])
router.include_router(pledges.router, tags=["pledges"])
router.include_router(subscribers.router, tags=["subscribers"])
router.include_router(payments.router, tags=["payments"])
router.include_router(upload.router, tags=["upload"])
