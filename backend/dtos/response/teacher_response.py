"""
Teacher Response DTOs
"""

from datetime import date
from typing import List, Optional

from domain.entities import Teacher
from dtos.base import CamelModel
from dtos.response.student_response import AddressResponse


class TeacherResponse(CamelModel):
    id: str
    full_name: str
    email: str
    employee_id: str
    department: str
    title: str
    status: str
    hire_date: date
    years_of_service: int
    phone_number: Optional[str] = None
    address: Optional[AddressResponse] = None
    specializations: List[str]
    qualifications: List[str]
    max_courses_per_semester: int
    current_course_load: int
    workload_percentage: float
    office_location: Optional[str] = None
    office_hours: Optional[str] = None

    @classmethod
    def from_entity(cls, teacher: Teacher) -> "TeacherResponse":
        return cls(
            id=teacher.id,
            full_name=str(teacher.full_name),
            email=str(teacher.email),
            employee_id=teacher.employee_id,
            department=teacher.department,
            title=teacher.title.value,
            status=teacher.status.value,
            hire_date=teacher.hire_date,
            years_of_service=teacher.years_of_service,
            phone_number=str(teacher.phone_number) if teacher.phone_number else None,
            address=AddressResponse.from_value(teacher.address),
            specializations=list(teacher.specializations),
            qualifications=list(teacher.qualifications),
            max_courses_per_semester=teacher.max_courses_per_semester,
            current_course_load=teacher.current_course_load,
            workload_percentage=teacher.workload_percentage,
            office_location=teacher.office_location,
            office_hours=teacher.office_hours,
        )


class TeacherListItemResponse(CamelModel):
    id: str
    full_name: str
    email: str
    department: str
    title: str
    status: str
    current_course_load: int
    max_courses_per_semester: int

    @classmethod
    def from_entity(cls, teacher: Teacher) -> "TeacherListItemResponse":
        return cls(
            id=teacher.id,
            full_name=str(teacher.full_name),
            email=str(teacher.email),
            department=teacher.department,
            title=teacher.title.value,
            status=teacher.status.value,
            current_course_load=teacher.current_course_load,
            max_courses_per_semester=teacher.max_courses_per_semester,
        )
