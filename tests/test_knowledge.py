import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from hostess.models.knowledge import KnowledgeRecord, load_knowledge


def write(tmp_path, text):
    path = tmp_path / "restaurant.json"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_valid_file(tmp_path):
    path = write(tmp_path, json.dumps({"name": "Luna Bistro", "hours": "5pm-10pm"}))

    record = load_knowledge(path)

    assert record.name == "Luna Bistro"
    assert record.as_document() == {"name": "Luna Bistro", "hours": "5pm-10pm"}


def test_missing_file_yields_default(tmp_path):
    record = load_knowledge(tmp_path / "nope.json")

    assert record.name == "The Restaurant"
    assert record.as_document() == {"name": "The Restaurant"}


@pytest.mark.parametrize(
    "text",
    [
        "{not json",
        "",
        '["Luna Bistro"]',
        '{"name": 42}',
    ],
)
def test_corrupt_file_yields_default(tmp_path, text):
    record = load_knowledge(write(tmp_path, text))

    assert record.name == "The Restaurant"


def test_unreadable_encoding_yields_default(tmp_path):
    path = tmp_path / "restaurant.json"
    path.write_bytes(b'{"name": "\xff\xfe"}')

    assert load_knowledge(path).name == "The Restaurant"


def test_missing_or_blank_name_gets_default(tmp_path):
    record = load_knowledge(write(tmp_path, '{"hours": "5pm-10pm"}'))
    assert record.name == "The Restaurant"
    assert record.as_document()["hours"] == "5pm-10pm"

    assert KnowledgeRecord(name="  ").name == "The Restaurant"
    assert KnowledgeRecord(name=None).name == "The Restaurant"


def test_record_is_frozen():
    record = KnowledgeRecord(name="Luna Bistro")
    with pytest.raises(ValidationError):
        record.name = "Other"


def test_bundled_knowledge_file_loads():
    record = load_knowledge(Path(__file__).parent.parent / "data" / "restaurant.json")
    assert record.name == "Luna Bistro"
    assert "menu" in record.as_document()


def test_document_keeps_file_key_order(tmp_path):
    path = write(tmp_path, '{"hours": "5pm-10pm", "name": "Luna Bistro", "menu": ["Risotto"]}')

    record = load_knowledge(path)

    assert list(record.as_document()) == ["hours", "name", "menu"]


def test_default_name_is_listed_first(tmp_path):
    record = load_knowledge(write(tmp_path, '{"hours": "5pm-10pm", "phone": "555-0142"}'))

    assert list(record.as_document()) == ["name", "hours", "phone"]
