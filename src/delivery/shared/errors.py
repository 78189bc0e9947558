"""Delivery domain errors.

Every rule violation in the delivery domain is raised as a ``DeliveryError``.
It is a Protean ``ValidationError``, so the command pipeline and the HTTP
exception handlers treat it like any other domain validation failure, and it
carries an ``ErrorKind`` so callers can tell a business rejection apart from
malformed input or a broken invariant.
"""

from enum import Enum

from protean.exceptions import ValidationError


class ErrorKind(Enum):
    # Malformed or missing arguments
    INVALID_INPUT = "Invalid_Input"
    OUT_OF_RANGE = "Out_Of_Range"

    # Illegal aggregate transition
    INVALID_STATE = "Invalid_State"

    # Business-rule rejections
    CAPACITY_EXCEEDED = "Capacity_Exceeded"
    NO_AVAILABLE_STORAGE = "No_Available_Storage"
    NO_ELIGIBLE_COURIER = "No_Eligible_Courier"

    # Precondition violations
    ALREADY_OCCUPIED = "Already_Occupied"
    ALREADY_ASSIGNED = "Already_Assigned"
    MISMATCH = "Mismatch"

    # Corrupted data, a bug somewhere else
    NOT_FOUND = "Not_Found"


class DeliveryError(ValidationError):
    """A delivery rule violation, tagged with its kind."""

    def __init__(self, kind: ErrorKind, field: str, message: str):
        self.kind = kind
        self.field = field
        self.message = message
        super().__init__({field: [message]})
