import pytest

from json_classgen.analyzer import infer_schema


@pytest.fixture
def person_data():
    """Sample document with a nested object and a primitive array."""
    return {
        "name": "Ana",
        "age": 30,
        "tags": ["x", "y"],
        "address": {"city": "Lima"},
    }


@pytest.fixture
def person_schema(person_data):
    return infer_schema(person_data, "Person")


@pytest.fixture
def json_file(tmp_path):
    """Write a JSON text to a temporary file and return its path."""

    def _write(text, name="sample.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
