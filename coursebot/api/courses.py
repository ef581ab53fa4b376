"""Diagnostic course listing endpoint"""
from typing import List
from fastapi import APIRouter, Depends
from coursebot.api.dependencies import get_course_repository
from coursebot.core.interfaces import ICourseRepository

router = APIRouter()


@router.get("/test-courses")
async def list_active_courses(
    repository: ICourseRepository = Depends(get_course_repository)
) -> List[dict]:
    """
    Return the active catalog exactly as the matcher sees it.

    Same fail-soft behaviour as the bot: a storage error yields [].
    """
    courses = await repository.fetch_active_catalog()
    return [course.to_dict() for course in courses]
