"""Schema of the JSON body returned for failed requests."""

from pydantic import BaseModel


class ErrorRead(BaseModel):
    error: str
    message: str
