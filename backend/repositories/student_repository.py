"""
Student repository for data access operations.
"""

from typing import Optional

from sqlalchemy.orm import Session

from constants import SortDirection
from domain.entities import Student
from domain.value_objects import GPA, Email, FullName, PhoneNumber, StudentStatus
from models import Student as StudentModel, StudentAddress
from .address_mapping import address_from_row, apply_address
from .base_repository import BaseRepository, Page
from .specifications import Specification
from .student_specifications import StudentsOnProbationSpec

SORT_COLUMNS = {
    "fullname": StudentModel.full_name,
    "email": StudentModel.email,
    "dateofbirth": StudentModel.date_of_birth,
    "gpa": StudentModel.gpa,
    "status": StudentModel.status,
    "enrollmentdate": StudentModel.enrollment_date,
}


class StudentRepository(BaseRepository[Student, StudentModel]):
    """Repository for Student aggregates."""

    def __init__(self, db: Session):
        super().__init__(db, StudentModel)

    def _to_entity(self, row: StudentModel) -> Student:
        return Student(
            id=row.id,
            full_name=FullName(row.full_name),
            date_of_birth=row.date_of_birth,
            email=Email(row.email),
            phone_number=PhoneNumber(row.phone_number) if row.phone_number else None,
            address=address_from_row(row.address),
            gpa=GPA(row.gpa) if row.gpa is not None else None,
            status=StudentStatus(row.status),
            enrollment_date=row.enrollment_date,
        )

    def _apply_to_row(self, student: Student, row: StudentModel) -> None:
        row.full_name = str(student.full_name)
        row.email = str(student.email)
        row.date_of_birth = student.date_of_birth
        row.phone_number = str(student.phone_number) if student.phone_number else None
        row.gpa = student.gpa.value if student.gpa else None
        row.status = student.status.value
        row.enrollment_date = student.enrollment_date
        row.address = apply_address(student.address, row.address, StudentAddress)

    def exists_by_email(self, email: Email, exclude_id: Optional[str] = None) -> bool:
        """
        Check whether an email is already taken.

        Soft-deleted students keep their address reserved, so this looks at
        every row rather than only live ones.

        Args:
            email: Address to look for
            exclude_id: Student to ignore (the one being updated)

        Returns:
            True if another student uses the address
        """
        query = self.db.query(StudentModel).filter(StudentModel.email == str(email))
        if exclude_id:
            query = query.filter(StudentModel.id != exclude_id)
        return query.count() > 0

    def get_paginated(
        self,
        spec: Specification[Student],
        page_number: int,
        page_size: int,
        sort_by: str = "FullName",
        sort_direction: SortDirection = SortDirection.ASC,
    ) -> Page[Student]:
        column = SORT_COLUMNS.get(sort_by.lower(), StudentModel.full_name)
        ordered = column.desc() if sort_direction == SortDirection.DESC else column.asc()
        # Tie-break on id so paging is stable
        return self.paginate(spec, page_number, page_size, order_by=(ordered, StudentModel.id))

    def get_on_probation(self, threshold: float, page_number: int, page_size: int) -> Page[Student]:
        return self.paginate(
            StudentsOnProbationSpec(threshold),
            page_number,
            page_size,
            order_by=(StudentModel.gpa.asc(), StudentModel.full_name.asc()),
        )
