"""Schema Base - camelCase aliasing shared by every request/response model."""

import datetime as dt

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_today() -> dt.date:
    """Calendar day in UTC; default for date fields the client may omit."""
    return dt.datetime.now(dt.timezone.utc).date()


class CamelModel(BaseModel):
    """Accepts camelCase or snake_case input, serializes camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str
