"""
Teachers API endpoints
"""
from fastapi import APIRouter, Depends, Query, Response
from typing import Optional

from constants import HTTPStatus, Pagination
from dependencies import get_teacher_service
from dtos.request import ChangeEmploymentStatusRequest, CreateTeacherRequest, TeacherListRequest
from dtos.response import MessageResponse, PaginatedResponse, TeacherListItemResponse, TeacherResponse
from services.interfaces import ITeacherService
from utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("", status_code=HTTPStatus.CREATED, response_model=str)
@handle_api_errors("Create teacher")
def create_teacher(
    request: CreateTeacherRequest,
    service: ITeacherService = Depends(get_teacher_service),
):
    return service.create_teacher(request=request)


@router.get("", response_model=PaginatedResponse[TeacherListItemResponse])
@handle_api_errors("List teachers")
def list_teachers(
    page_number: int = Query(Pagination.DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(Pagination.DEFAULT_PAGE_SIZE, alias="pageSize"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    department: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    service: ITeacherService = Depends(get_teacher_service),
):
    request = TeacherListRequest(
        page_number=page_number,
        page_size=page_size,
        search_term=search_term,
        department=department,
        status=status,
    )
    return service.list_teachers(request)


@router.get("/{teacher_id}", response_model=TeacherResponse)
@handle_api_errors("Get teacher")
def get_teacher(teacher_id: str, service: ITeacherService = Depends(get_teacher_service)):
    return service.get_teacher(teacher_id)


@router.post("/{teacher_id}/courses/{course_id}", response_model=MessageResponse)
@handle_api_errors("Assign teacher to course")
def assign_course(
    teacher_id: str,
    course_id: str,
    service: ITeacherService = Depends(get_teacher_service),
):
    """Assign a course, counting it against the teacher's semester load."""
    message = service.assign_course(teacher_id=teacher_id, course_id=course_id)
    return MessageResponse(message=message)


@router.delete("/{teacher_id}/courses/{course_id}", response_model=MessageResponse)
@handle_api_errors("Remove teacher from course")
def remove_course(
    teacher_id: str,
    course_id: str,
    service: ITeacherService = Depends(get_teacher_service),
):
    message = service.remove_course(teacher_id=teacher_id, course_id=course_id)
    return MessageResponse(message=message)


@router.put("/{teacher_id}/status", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Change teacher status")
def change_teacher_status(
    teacher_id: str,
    request: ChangeEmploymentStatusRequest,
    service: ITeacherService = Depends(get_teacher_service),
):
    service.change_status(teacher_id=teacher_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)
