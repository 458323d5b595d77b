"""
Mapping between the Address value object and owned address rows.
"""

from typing import Optional, Type

from domain.value_objects import Address


def address_from_row(row) -> Optional[Address]:
    if row is None:
        return None
    return Address(
        street=row.street,
        street2=row.street2,
        city=row.city,
        state=row.state,
        zip_code=row.zip_code,
        country=row.country,
    )


def apply_address(address: Optional[Address], current_row, row_class: Type):
    """
    Return the owned row that should hang off the parent after an update.

    Reuses the existing row when present so SQLAlchemy issues an UPDATE rather
    than a delete/insert pair.
    """
    if address is None:
        return None
    row = current_row if current_row is not None else row_class()
    row.street = address.street
    row.street2 = address.street2
    row.city = address.city
    row.state = address.state
    row.zip_code = address.zip_code
    row.country = address.country
    return row
