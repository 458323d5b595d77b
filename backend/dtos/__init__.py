"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the domain entities
and database models. DTOs prevent leaking internal structure to external APIs
and allow independent evolution.

Structure:
- request/: DTOs for incoming API requests (commands and list queries)
- response/: DTOs for outgoing API responses
"""
