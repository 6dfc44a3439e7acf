from pydantic import BaseModel
from typing import List, Optional

class FieldError(BaseModel):
    field: str
    message: str

class Message(BaseModel):
    message: str

class ValidationErrorResponse(Message):
    errors: List[FieldError]

def field_errors_from_pydantic(errors: List[dict], strip_prefix: Optional[str] = None) -> List[FieldError]:
    """
    Flatten pydantic error dicts into field/message pairs.

    The ``loc`` tuple is joined with dots. ``strip_prefix`` drops a leading
    location segment such as ``"body"`` or ``"query"`` added by FastAPI.
    """
    field_errors = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if strip_prefix and loc and loc[0] == strip_prefix and len(loc) > 1:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        field_errors.append(FieldError(field=field, message=error.get("msg", "Invalid value")))
    return field_errors
