"""API v1 router aggregation."""

from fastapi import APIRouter

from projectmatch.api.v1.projects import router as projects_router

router = APIRouter(prefix="/api/v1")

router.include_router(projects_router)
