"""
Students API endpoints
"""
from fastapi import APIRouter, Depends, Query, Response
from typing import Optional
import logging

from constants import HTTPStatus, Pagination
from dependencies import get_student_service
from dtos.request import (
    ChangeStatusRequest,
    CreateStudentRequest,
    StudentListRequest,
    UpdateGpaRequest,
    UpdateStudentContactRequest,
    UpdateStudentRequest,
)
from dtos.response import PaginatedResponse, StudentListItemResponse, StudentResponse
from services.interfaces import IStudentService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=PaginatedResponse[StudentListItemResponse])
@handle_api_errors("List students")
def list_students(
    page_number: int = Query(Pagination.DEFAULT_PAGE_NUMBER, alias="pageNumber"),
    page_size: int = Query(Pagination.DEFAULT_PAGE_SIZE, alias="pageSize"),
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    status: Optional[str] = Query(None),
    sort_by: str = Query("FullName", alias="sortBy"),
    sort_direction: str = Query("asc", alias="sortDirection"),
    min_gpa: Optional[float] = Query(None, alias="minGPA"),
    max_gpa: Optional[float] = Query(None, alias="maxGPA"),
    min_age: Optional[int] = Query(None, alias="minAge"),
    max_age: Optional[int] = Query(None, alias="maxAge"),
    service: IStudentService = Depends(get_student_service),
):
    """
    List students with paging, filtering and sorting.

    Query parameters are validated by StudentListRequest; failures come back
    as 400 with one entry per offending parameter.
    """
    request = StudentListRequest(
        page_number=page_number,
        page_size=page_size,
        search_term=search_term,
        status=status,
        sort_by=sort_by,
        sort_direction=sort_direction,
        min_gpa=min_gpa,
        max_gpa=max_gpa,
        min_age=min_age,
        max_age=max_age,
    )
    return service.list_students(request)


@router.get("/probation", response_model=PaginatedResponse[StudentListItemResponse])
@handle_api_errors("List students on probation")
def list_students_on_probation(
    page_number: int = Query(Pagination.DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=1),
    page_size: int = Query(Pagination.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=Pagination.MAX_PAGE_SIZE),
    service: IStudentService = Depends(get_student_service),
):
    """Students whose GPA is below the passing threshold, lowest GPA first."""
    return service.list_on_probation(page_number=page_number, page_size=page_size)


@router.get("/status/{status}", response_model=PaginatedResponse[StudentListItemResponse])
@handle_api_errors("List students by status")
def list_students_by_status(
    status: str,
    page_number: int = Query(Pagination.DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=1),
    page_size: int = Query(Pagination.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=Pagination.MAX_PAGE_SIZE),
    service: IStudentService = Depends(get_student_service),
):
    return service.list_by_status(status=status, page_number=page_number, page_size=page_size)


@router.get("/{student_id}", response_model=StudentResponse)
@handle_api_errors("Get student")
def get_student(student_id: str, service: IStudentService = Depends(get_student_service)):
    return service.get_student(student_id=student_id)


@router.post("", status_code=HTTPStatus.CREATED, response_model=str)
@handle_api_errors("Create student")
def create_student(
    request: CreateStudentRequest,
    service: IStudentService = Depends(get_student_service),
):
    """
    Register a student.

    Returns:
        The new student's id

    Raises:
        ConflictError: If the email is already registered (409)
    """
    return service.create_student(request=request)


@router.put("/{student_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Update student")
def update_student(
    student_id: str,
    request: UpdateStudentRequest,
    service: IStudentService = Depends(get_student_service),
):
    service.update_student(student_id=student_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.put("/{student_id}/contact", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Update student contact")
def update_student_contact(
    student_id: str,
    request: UpdateStudentContactRequest,
    service: IStudentService = Depends(get_student_service),
):
    service.update_contact(student_id=student_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.put("/{student_id}/gpa", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Update student GPA")
def update_student_gpa(
    student_id: str,
    request: UpdateGpaRequest,
    service: IStudentService = Depends(get_student_service),
):
    service.update_gpa(student_id=student_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.put("/{student_id}/status", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Change student status")
def change_student_status(
    student_id: str,
    request: ChangeStatusRequest,
    service: IStudentService = Depends(get_student_service),
):
    service.change_status(student_id=student_id, request=request)
    return Response(status_code=HTTPStatus.NO_CONTENT)


@router.delete("/{student_id}", status_code=HTTPStatus.NO_CONTENT, response_class=Response)
@handle_api_errors("Delete student")
def delete_student(student_id: str, service: IStudentService = Depends(get_student_service)):
    """Soft-delete a student; the email stays reserved."""
    service.delete_student(student_id=student_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
