# tests/infrastructure/test_json_scenario_loader.py
import json

import pytest

from pitcher.domain.assertions import not_found
from pitcher.domain.exceptions import ScenarioLoadError
from pitcher.infrastructure.scenario.json_loader import JsonScenarioLoader


def test_load_json_scenario(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(
        json.dumps(
            {
                "steps": [
                    {"name": "missing-user", "path": "/users/0", "assert": ["not_found"]},
                    {"name": "raw", "method": "PUT", "path": "/users/1", "body": "a=1", "content_type": "text/plain"},
                ]
            }
        ),
        encoding="utf-8",
    )

    scenario = JsonScenarioLoader().load_from_file(path)

    missing, raw = scenario.steps
    assert missing.assertions == [not_found]
    assert raw.request.body == "a=1"
    assert raw.request.content_type == "text/plain"
    assert scenario.session == {}


def test_load_from_dict():
    scenario = JsonScenarioLoader().load_from_dict({"steps": [{"name": "a", "path": "/a"}]})

    assert scenario.steps[0].name == "a"
    assert scenario.source == ""


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="Unable to read"):
        JsonScenarioLoader().load_from_file(path)


def test_empty_step_name_rejected():
    with pytest.raises(ScenarioLoadError):
        JsonScenarioLoader().load_from_dict({"steps": [{"name": ""}]})


def test_blank_file_is_empty(tmp_path):
    path = tmp_path / "blank.json"
    path.write_text("  \n", encoding="utf-8")

    with pytest.raises(ScenarioLoadError, match="empty"):
        JsonScenarioLoader().load_from_file(path)


def test_file_with_byte_order_mark(tmp_path):
    path = tmp_path / "bom.json"
    path.write_text('{"steps": [{"name": "a", "path": "/a"}]}', encoding="utf-8-sig")

    scenario = JsonScenarioLoader().load_from_file(path)

    assert scenario.step_names() == ["a"]
