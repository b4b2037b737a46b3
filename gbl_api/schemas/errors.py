"""
schemas/errors.py — Error response body

Shared by the HTTPException, RequestValidationError and Exception
handlers in main.py.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
