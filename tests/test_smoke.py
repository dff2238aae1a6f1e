import json

from fastapi.testclient import TestClient
from csv2json.main import app

client = TestClient(app)

CONFIG = json.dumps({"customFieldNames": ["name", "city"]})

def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_convert_record():
    files = {"file": ("record.csv", "Paul,Montréal\n".encode("utf-8"), "text/csv")}
    r = client.post("/convert", files=files, data={"config": CONFIG})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")

    # non-ASCII is written as-is, followed by exactly one newline
    assert r.content == '{"name":"Paul","city":"Montréal"}\n'.encode("utf-8")

def test_convert_rejects_latin1_record():
    raw = "Paul,Montréal\n".encode("latin-1")

    files = {"file": ("record.csv", raw, "text/csv")}
    r = client.post("/convert", files=files, data={"config": CONFIG})
    assert r.status_code == 422
    assert r.json()["detail"]["cause"] == "UnicodeDecodeError"

def test_convert_rejects_missing_field_names():
    files = {"file": ("record.csv", b"a,b\n", "text/csv")}
    r = client.post("/convert", files=files, data={"config": json.dumps({"delimiter": ";"})})
    assert r.status_code == 422
    assert r.json()["detail"]["error"] == "invalid converter options"

def test_convert_pretty_printed():
    config = json.dumps({"customFieldNames": ["a", "b"], "jsonFormat": "PRETTYPRINT"})
    files = {"file": ("record.csv", b"1,2", "text/csv")}
    r = client.post("/convert", files=files, data={"config": config})
    assert r.status_code == 200
    assert r.text == '{\n  "a": "1",\n  "b": "2"\n}\n'
