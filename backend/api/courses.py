"""
Courses API endpoints
"""
from fastapi import APIRouter, Depends, Query, Response
from typing import List, Optional
import logging

from constants import CourseRules, HTTPStatus, Pagination
from dependencies import get_course_service
from dtos.request import (
    CompleteCourseRequest,
    CourseListRequest,
    CreateCourseRequest,
    ScheduleCourseRequest,
    UpdateCourseRequest,
)
from dtos.response import CourseListItemResponse, CourseResponse, MessageResponse, PaginatedResponse
from services.interfaces import ICourseService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=HTTPStatus.CREATED, response_model=str)
@handle_api_errors("Create course")
def create_course(
    request: CreateCourseRequest,
    service: ICourseService = Depends(get_course_service),
):
    """
    Add a course to the catalog.

    Returns:
        The new course's id
    """
    return service.create_course(request=request)


@router.put("/{course_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Update course")
def update_course(
    course_id: str,
    request: UpdateCourseRequest,
    service: ICourseService = Depends(get_course_service),
):
    service.update_course(course_id=course_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.post("/{course_id}/schedule", response_model=MessageResponse)
@handle_api_errors("Schedule course")
def schedule_course(
    course_id: str,
    request: ScheduleCourseRequest,
    service: ICourseService = Depends(get_course_service),
):
    message = service.schedule_course(course_id=course_id, request=request)
    return MessageResponse(message=message)


@router.post("/{course_id}/activate", response_model=MessageResponse)
@handle_api_errors("Activate course")
def activate_course(course_id: str, service: ICourseService = Depends(get_course_service)):
    """Open a scheduled course; draft or finished courses are rejected with 400."""
    message = service.activate_course(course_id=course_id)
    return MessageResponse(message=message)


@router.post("/{course_id}/complete", response_model=MessageResponse)
@handle_api_errors("Complete course")
def complete_course(
    course_id: str,
    request: Optional[CompleteCourseRequest] = None,
    service: ICourseService = Depends(get_course_service),
):
    message = service.complete_course(course_id=course_id, request=request or CompleteCourseRequest())
    return MessageResponse(message=message)


@router.get("", response_model=PaginatedResponse[CourseListItemResponse])
@handle_api_errors("List courses")
def list_courses(
    page_number: int = Query(Pagination.DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(Pagination.DEFAULT_PAGE_SIZE, alias="pageSize"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    department: Optional[str] = Query(None),
    level: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    sort_by: str = Query(CourseRules.DEFAULT_SORT, alias="sortBy"),
    sort_direction: str = Query("asc", alias="sortDirection"),
    service: ICourseService = Depends(get_course_service),
):
    request = CourseListRequest(
        page_number=page_number,
        page_size=page_size,
        search_term=search_term,
        department=department,
        level=level,
        status=status,
        sort_by=sort_by,
        sort_direction=sort_direction,
    )
    return service.list_courses(request)


@router.get("/department/{department}", response_model=List[CourseListItemResponse])
@handle_api_errors("List courses by department")
def list_courses_by_department(
    department: str,
    level: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    service: ICourseService = Depends(get_course_service),
):
    """Courses offered by a department, sorted by title."""
    return service.list_by_department(department, level=level, status=status)


@router.get("/{course_id}", response_model=CourseResponse)
@handle_api_errors("Get course")
def get_course(course_id: str, service: ICourseService = Depends(get_course_service)):
    return service.get_course(course_id=course_id)
