"""
CSV record -> JSON record conversion.

Responsibilities:
- strict UTF-8 decoding of one record
- positional mapping of columns onto configured field names
- dropping ignored fields
- replacing encoded fields with a one-way digest
- newline-terminated JSON output
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from .errors import ConfigurationError, ConversionFailure
from .hashing import Digester, MD5Digester
from .models import ConverterConfig
from .printers import JSONPrinter, get_printer
from .rules import NEW_LINE, OPTION_NAME, RECORD_ENCODING

logger = logging.getLogger(__name__)


def _load_config(config: Union[ConverterConfig, Mapping[str, Any]]) -> ConverterConfig:
    if isinstance(config, ConverterConfig):
        return config
    try:
        return ConverterConfig.model_validate(config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid converter options: {e}", e) from e


class RecordConverter:
    """
    Convert one CSV record into one JSON record.

    customFieldNames is required; delimiter defaults to a comma.
    Configuration is fixed at construction, so one instance can be shared
    between threads as long as the printer and digester are stateless.
    """

    def __init__(
        self,
        config: Union[ConverterConfig, Mapping[str, Any]],
        printer: Optional[JSONPrinter] = None,
        digester: Optional[Digester] = None,
    ):
        config = _load_config(config)
        self._field_names = tuple(config.custom_field_names)
        self._delimiter = config.delimiter
        self._ignored_field_names = tuple(config.ignored_field_names)
        self._encoded_field_names = tuple(config.encoded_field_names)
        self._printer = printer if printer is not None else get_printer(config)
        self._digester = digester if digester is not None else MD5Digester()
        logger.info("Created %r", self)

    @property
    def field_names(self) -> tuple[str, ...]:
        return self._field_names

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def ignored_field_names(self) -> tuple[str, ...]:
        return self._ignored_field_names

    @property
    def encoded_field_names(self) -> tuple[str, ...]:
        return self._encoded_field_names

    @property
    def printer(self) -> JSONPrinter:
        return self._printer

    @property
    def digester(self) -> Digester:
        return self._digester

    def convert(self, raw: bytes) -> bytes:
        """
        Convert the bytes of one record into newline-terminated JSON bytes.

        Rules:
        - Input must be valid UTF-8; there is no replacement-character fallback.
        - One trailing newline is stripped before splitting.
        - The delimiter is a literal separator: quoting is not interpreted.
        - Missing trailing columns map to null, and so do trailing empty ones.
        - Encoded fields must hold a value once ignored fields are dropped.

        Raises ConversionFailure on any error; nothing is returned in that case.
        """
        try:
            text = bytes(raw).decode(RECORD_ENCODING)
        except UnicodeDecodeError as e:
            raise ConversionFailure("Unable to decode record as UTF-8", e) from e

        # the output gets its own newline back after serialization
        if text.endswith(NEW_LINE):
            text = text[: -len(NEW_LINE)]

        try:
            record = self._map_columns(text)
        except Exception as e:
            raise ConversionFailure("Unable to create the column map", e) from e

        for field_name in self._ignored_field_names:
            record.pop(field_name, None)

        try:
            for field_name in self._encoded_field_names:
                record[field_name] = self._encode(record, field_name)
        except Exception as e:
            raise ConversionFailure("Unable to encode record fields", e) from e

        try:
            data_json = self._printer.write_as_string(record) + NEW_LINE
        except Exception as e:
            raise ConversionFailure("Unable to write record as JSON", e) from e
        return data_json.encode(RECORD_ENCODING)

    def _map_columns(self, text: str) -> Dict[str, Optional[str]]:
        columns = text.split(self._delimiter)
        # trailing empty columns count as missing, unless the delimiter never occurs
        if len(columns) > 1:
            while columns and columns[-1] == "":
                columns.pop()
        record: Dict[str, Optional[str]] = {}

        for i, field_name in enumerate(self._field_names):
            if i < len(columns):
                record[field_name] = columns[i]
            else:
                logger.debug("Null field in CSV detected: %s", field_name)
                record[field_name] = None

        return record

    def _encode(self, record: Dict[str, Optional[str]], field_name: str) -> str:
        if field_name not in record:
            raise KeyError(f"field {field_name!r} is not in the record")
        value = record[field_name]
        if value is None:
            raise ValueError(f"field {field_name!r} has no value to encode")
        return self._digester.digest(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}{{ delimiter: [{self._delimiter}], fields: {list(self._field_names)}}}"

    __str__ = __repr__


def build_converter(options: Mapping[str, Any], printer: Optional[JSONPrinter] = None) -> RecordConverter:
    """Build the converter named by a processing option block ("optionName": "CSVTOJSON")."""
    option_name = options.get("optionName", options.get("option_name"))
    if option_name != OPTION_NAME:
        raise ConfigurationError(f"Unsupported optionName: {option_name!r} (expected {OPTION_NAME!r})")
    return RecordConverter(options, printer=printer)
