"""
Domain Layer

This package contains the core business domain logic, separated from
persistence concerns and infrastructure.

Structure:
- entities/: Aggregate roots (Student, Course, Teacher) with identity and lifecycle
- value_objects/: Immutable value types without identity
- events/: Domain events raised by aggregates
"""
