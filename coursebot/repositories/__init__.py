"""Catalog repositories"""
from coursebot.repositories.course_repository import FirestoreCourseRepository

__all__ = ["FirestoreCourseRepository"]
