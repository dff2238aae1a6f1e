from __future__ import annotations

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .rules import DEFAULT_DELIMITER


class JsonFormat(str, Enum):
    COMPACT = "COMPACT"
    PRETTYPRINT = "PRETTYPRINT"


class ConverterConfig(BaseModel):
    """
    Options of one CSV -> JSON converter.

    Accepts the camelCase keys of a processing option block, e.g.
    {"optionName": "CSVTOJSON", "customFieldNames": ["a", "b"], "delimiter": "\\t"}.
    Unknown keys are ignored so the whole block can be passed as-is.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    option_name: Optional[str] = Field(default=None, alias="optionName")
    custom_field_names: List[str] = Field(alias="customFieldNames", min_length=1)
    delimiter: str = Field(default=DEFAULT_DELIMITER)
    ignored_field_names: List[str] = Field(default_factory=list, alias="ignoredFieldNames")
    encoded_field_names: List[str] = Field(default_factory=list, alias="encodedFieldNames")
    json_format: JsonFormat = Field(default=JsonFormat.COMPACT, alias="jsonFormat")


class ConversionErrorDetail(BaseModel):
    error: str
    cause: Optional[str] = Field(default=None, examples=["UnicodeDecodeError"])


class HealthResponse(BaseModel):
    ok: bool = True
