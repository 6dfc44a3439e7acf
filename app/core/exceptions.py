from typing import List

VALIDATION_FAILED = "Validation failed"

class VehicleValidationError(Exception):
    """
    Raised when a caller-supplied payload does not satisfy the vehicle schema.

    ``errors`` holds one ``FieldError`` per failing field and is returned to
    HTTP callers verbatim.
    """

    def __init__(self, errors: List):
        self.errors = errors
        super().__init__(VALIDATION_FAILED)
