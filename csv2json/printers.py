from __future__ import annotations

import json
from typing import Any, Mapping, Protocol

from .models import ConverterConfig, JsonFormat


class JSONPrinter(Protocol):
    def write_as_string(self, record: Mapping[str, Any]) -> str: ...


class CompactJSONPrinter:
    def write_as_string(self, record: Mapping[str, Any]) -> str:
        return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


class PrettyJSONPrinter:
    def __init__(self, indent: int = 2):
        self.indent = indent

    def write_as_string(self, record: Mapping[str, Any]) -> str:
        return json.dumps(record, ensure_ascii=False, indent=self.indent)


def get_printer(config: ConverterConfig) -> JSONPrinter:
    """Pick the printer selected by the jsonFormat option (compact by default)."""
    if config.json_format is JsonFormat.PRETTYPRINT:
        return PrettyJSONPrinter()
    return CompactJSONPrinter()
