"""事件读取与步骤输出测试"""

import json

from pr_quality_checker.config import Settings
from pr_quality_checker.core.models import ErrorKind, Report
from pr_quality_checker.event import publish, pull_request_body, read_event, set_output


def test_read_event(tmp_path):
    path = tmp_path / "event.json"
    path.write_text(json.dumps({"pull_request": {"body": "hello"}}), encoding="utf-8")
    outcome = read_event(str(path))
    assert outcome.ok
    assert pull_request_body(outcome.value) == "hello"


def test_read_event_missing_path():
    outcome = read_event(None)
    assert outcome.error == ErrorKind.INPUT_FAILURE


def test_read_event_missing_file(tmp_path):
    outcome = read_event(str(tmp_path / "nope.json"))
    assert outcome.error == ErrorKind.INPUT_FAILURE


def test_read_event_invalid_json(tmp_path):
    path = tmp_path / "event.json"
    path.write_text("{not json", encoding="utf-8")
    outcome = read_event(str(path))
    assert outcome.error == ErrorKind.INPUT_FAILURE
    assert pull_request_body(outcome.unwrap_or({})) == ""


def test_pull_request_body_shapes():
    assert pull_request_body({}) == ""
    assert pull_request_body([]) == ""
    assert pull_request_body({"pull_request": None}) == ""
    assert pull_request_body({"pull_request": {"body": None}}) == ""


def test_set_output_heredoc(tmp_path):
    path = tmp_path / "output"
    set_output(str(path), "comment", "line one\nline two")
    set_output(str(path), "fail", "false")
    assert path.read_text(encoding="utf-8") == (
        "comment<<EOF\nline one\nline two\nEOF\n"
        "fail<<EOF\nfalse\nEOF\n"
    )


def test_set_output_without_path_is_noop():
    set_output(None, "fail", "true")


def test_publish(tmp_path):
    path = tmp_path / "output"
    report = Report(lines=["- ❌ Repo link: missing"], critical_failure=True)
    publish(report, Settings(output_path=str(path)))
    content = path.read_text(encoding="utf-8")
    assert "comment<<EOF\n- ❌ Repo link: missing\nEOF\n" in content
    assert "fail<<EOF\ntrue\nEOF\n" in content
