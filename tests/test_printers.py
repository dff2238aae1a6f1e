from csv2json.models import ConverterConfig, JsonFormat
from csv2json.printers import CompactJSONPrinter, PrettyJSONPrinter, get_printer


def test_compact_printer():
    record = {"b": "1", "a": None}
    assert CompactJSONPrinter().write_as_string(record) == '{"b":"1","a":null}'


def test_pretty_printer():
    record = {"a": "1", "b": "é"}
    assert PrettyJSONPrinter().write_as_string(record) == '{\n  "a": "1",\n  "b": "é"\n}'


def test_get_printer_follows_json_format():
    compact = ConverterConfig(custom_field_names=["a"])
    pretty = ConverterConfig(custom_field_names=["a"], json_format=JsonFormat.PRETTYPRINT)
    assert isinstance(get_printer(compact), CompactJSONPrinter)
    assert isinstance(get_printer(pretty), PrettyJSONPrinter)
