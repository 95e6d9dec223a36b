from collections.abc import Sequence
from typing import NoReturn

from fastapi import HTTPException

from maintrack.domain.validation import FieldError


def raise_for_errors(errors: Sequence[FieldError]) -> NoReturn:
    """
    Translate component errors into an HTTPException.

    not_found -> 404, *_exists -> 409, anything else -> 400 with the first message.
    """
    codes = {e.code for e in errors}
    first = errors[0].message if errors else "Invalid request"

    if "not_found" in codes:
        detail = next(e.message for e in errors if e.code == "not_found")
        raise HTTPException(status_code=404, detail=detail)
    if any(code.endswith("_exists") for code in codes):
        detail = next(e.message for e in errors if e.code.endswith("_exists"))
        raise HTTPException(status_code=409, detail=detail)
    raise HTTPException(status_code=400, detail=first)
