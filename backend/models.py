from sqlalchemy import Column, String, Integer, Float, Text, Date, DateTime, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid
from database import Base

def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Audit and soft-delete columns shared by every aggregate table."""

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
    created_by = Column(String)
    updated_by = Column(String)
    deleted_at = Column(DateTime)  # Soft delete marker; NULL means live
    deleted_by = Column(String)


class Student(AuditMixin, Base):
    """
    Student aggregate table.

    Status values: Active, Inactive, Graduated, Suspended, Expelled.
    The address lives in the owned student_addresses table.
    """
    __tablename__ = 'students'

    id = Column(String, primary_key=True, default=generate_uuid)
    full_name = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False, unique=True)
    date_of_birth = Column(Date, nullable=False)
    phone_number = Column(String(20))
    gpa = Column(Float)
    status = Column(String(20), nullable=False, default='Active')
    enrollment_date = Column(Date, nullable=False)

    address = relationship(
        "StudentAddress",
        uselist=False,
        back_populates="student",
        cascade="all, delete-orphan",
        lazy="joined",
    )

    __table_args__ = (
        CheckConstraint("gpa IS NULL OR (gpa >= 0 AND gpa <= 4)", name='ck_students_gpa_range'),
        Index('idx_students_status', 'status'),
        Index('idx_students_full_name', 'full_name'),
    )


class Course(AuditMixin, Base):
    """
    Course aggregate table.

    Status lifecycle: Draft -> Scheduled -> Active -> Completed,
    with Inactive, Cancelled and Archived as side states.
    """
    __tablename__ = 'courses'

    id = Column(String, primary_key=True, default=generate_uuid)
    title = Column(String(100), nullable=False)
    code = Column(String(20), nullable=False, unique=True)
    description = Column(Text, nullable=False)
    credit_hours = Column(Integer, nullable=False)
    level = Column(String(20), nullable=False)
    department = Column(String(50), nullable=False)
    max_enrollment = Column(Integer, nullable=False, default=30)
    current_enrollment = Column(Integer, nullable=False, default=0)
    prerequisite_credit_hours = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default='Draft')
    semester = Column(String(20), nullable=False, default='')
    academic_year = Column(Integer, nullable=False)
    start_date = Column(Date)
    end_date = Column(Date)

    __table_args__ = (
        CheckConstraint("current_enrollment >= 0", name='ck_courses_enrollment_non_negative'),
        CheckConstraint("current_enrollment <= max_enrollment", name='ck_courses_enrollment_capacity'),
        Index('idx_courses_department', 'department'),
        Index('idx_courses_status', 'status'),
    )


class Teacher(AuditMixin, Base):
    """
    Teacher aggregate table.

    Specializations and qualifications are stored as JSON arrays.
    """
    __tablename__ = 'teachers'

    id = Column(String, primary_key=True, default=generate_uuid)
    full_name = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False, unique=True)
    phone_number = Column(String(20))
    employee_id = Column(String(20), nullable=False, unique=True)
    department = Column(String(50), nullable=False)
    title = Column(String(30), nullable=False)
    status = Column(String(20), nullable=False, default='Active')
    hire_date = Column(Date, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    specializations_json = Column(Text, nullable=False, default='[]')
    qualifications_json = Column(Text, nullable=False, default='[]')
    max_courses_per_semester = Column(Integer, nullable=False)
    current_course_load = Column(Integer, nullable=False, default=0)
    office_location = Column(String(100))
    office_hours = Column(String(200))

    address = relationship(
        "TeacherAddress",
        uselist=False,
        back_populates="teacher",
        cascade="all, delete-orphan",
        lazy="joined",
    )

    __table_args__ = (
        Index('idx_teachers_department', 'department'),
    )


class AddressColumnsMixin:
    street = Column(String(100), nullable=False)
    street2 = Column(String(100))
    city = Column(String(50), nullable=False)
    state = Column(String(2), nullable=False)
    zip_code = Column(String(10), nullable=False)
    country = Column(String(50), nullable=False, default='US')


class StudentAddress(AddressColumnsMixin, Base):
    """Owned address row, one per student at most."""
    __tablename__ = 'student_addresses'

    student_id = Column(String, ForeignKey('students.id', ondelete='CASCADE'), primary_key=True)
    student = relationship("Student", back_populates="address")


class TeacherAddress(AddressColumnsMixin, Base):
    """Owned address row, one per teacher at most."""
    __tablename__ = 'teacher_addresses'

    teacher_id = Column(String, ForeignKey('teachers.id', ondelete='CASCADE'), primary_key=True)
    teacher = relationship("Teacher", back_populates="address")
