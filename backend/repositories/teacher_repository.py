"""
Teacher repository for data access operations.
"""

import json
from typing import Optional

from sqlalchemy.orm import Session

from domain.entities import Teacher
from domain.value_objects import AcademicTitle, Email, EmploymentStatus, FullName, PhoneNumber
from models import Teacher as TeacherModel, TeacherAddress
from .address_mapping import address_from_row, apply_address
from .base_repository import BaseRepository, Page
from .specifications import Specification


class TeacherRepository(BaseRepository[Teacher, TeacherModel]):
    """Repository for Teacher aggregates."""

    def __init__(self, db: Session):
        super().__init__(db, TeacherModel)

    def _to_entity(self, row: TeacherModel) -> Teacher:
        return Teacher(
            id=row.id,
            full_name=FullName(row.full_name),
            email=Email(row.email),
            employee_id=row.employee_id,
            department=row.department,
            title=AcademicTitle(row.title),
            hire_date=row.hire_date,
            date_of_birth=row.date_of_birth,
            phone_number=PhoneNumber(row.phone_number) if row.phone_number else None,
            address=address_from_row(row.address),
            status=EmploymentStatus(row.status),
            specializations=json.loads(row.specializations_json or "[]"),
            qualifications=json.loads(row.qualifications_json or "[]"),
            max_courses_per_semester=row.max_courses_per_semester,
            current_course_load=row.current_course_load,
            office_location=row.office_location,
            office_hours=row.office_hours,
        )

    def _apply_to_row(self, teacher: Teacher, row: TeacherModel) -> None:
        row.full_name = str(teacher.full_name)
        row.email = str(teacher.email)
        row.employee_id = teacher.employee_id
        row.department = teacher.department
        row.title = teacher.title.value
        row.hire_date = teacher.hire_date
        row.date_of_birth = teacher.date_of_birth
        row.phone_number = str(teacher.phone_number) if teacher.phone_number else None
        row.status = teacher.status.value
        row.specializations_json = json.dumps(teacher.specializations)
        row.qualifications_json = json.dumps(teacher.qualifications)
        row.max_courses_per_semester = teacher.max_courses_per_semester
        row.current_course_load = teacher.current_course_load
        row.office_location = teacher.office_location
        row.office_hours = teacher.office_hours
        row.address = apply_address(teacher.address, row.address, TeacherAddress)

    def exists_by_email(self, email: Email) -> bool:
        return self.db.query(TeacherModel).filter(TeacherModel.email == str(email)).count() > 0

    def exists_by_employee_id(self, employee_id: str) -> bool:
        return (
            self.db.query(TeacherModel)
            .filter(TeacherModel.employee_id == employee_id.strip().upper())
            .count() > 0
        )

    def get_paginated(self, spec: Specification[Teacher], page_number: int, page_size: int) -> Page[Teacher]:
        return self.paginate(
            spec, page_number, page_size, order_by=(TeacherModel.full_name.asc(), TeacherModel.id)
        )
