"""
FastAPI dependencies for the long-lived pipeline objects.

The objects are created once in the application lifespan and stored on
app.state; tests replace them with app.dependency_overrides.
"""
from fastapi import Request, HTTPException, status
from coursebot.core.interfaces import ICourseRepository
from coursebot.services.event_handler import EventHandler


def get_event_handler(request: Request) -> EventHandler:
    handler = getattr(request.app.state, "event_handler", None)
    if handler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Event handler not initialized"
        )
    return handler


def get_course_repository(request: Request) -> ICourseRepository:
    repository = getattr(request.app.state, "course_repository", None)
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Course repository not initialized"
        )
    return repository
