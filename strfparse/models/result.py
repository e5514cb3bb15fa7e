"""Models for displaying parse results and directives."""

from datetime import datetime

from pydantic import BaseModel, Field


class ParseResult(BaseModel):
    """A successfully parsed date/time string.

    Attributes:
        input (str): The string that was parsed.
        format (str): The format it was parsed with.
        pattern (str): The extraction pattern derived from the format.
        parsed (datetime): The resulting datetime.
    """

    input: str = Field(json_schema_extra={"order": 0})
    format: str = Field(json_schema_extra={"style": "bold", "order": 1})
    pattern: str = Field(json_schema_extra={"style": "dim", "order": 2})
    parsed: datetime = Field(json_schema_extra={"style": "green", "order": 3})


class DirectiveInfo(BaseModel):
    """Public description of a supported format directive.

    Attributes:
        token (str): The directive, e.g. ``%Y``.
        meaning (str): The field it sets.
        range (str): How its value is interpreted or validated.
    """

    token: str = Field(
        title="Directive", json_schema_extra={"style": "bold", "order": 0}
    )
    meaning: str = Field(json_schema_extra={"order": 1})
    range: str = Field(json_schema_extra={"style": "dim", "order": 2})
