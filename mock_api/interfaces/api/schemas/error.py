"""Error body schema."""

from pydantic import BaseModel


class MessageRead(BaseModel):
    """Body returned by every failed request."""

    message: str
