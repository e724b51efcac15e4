"""配置测试"""

from pr_quality_checker.config import UNICORN_DELAY, Settings


def test_from_env():
    settings = Settings.from_env({
        "GITHUB_EVENT_PATH": "/tmp/event.json",
        "GITHUB_OUTPUT": "/tmp/output",
        "GITHUB_TOKEN": "abc",
        "RUNNER_DEBUG": "1",
        "PR_QUALITY_JSON_REPORT": "/tmp/report.json",
    })
    assert settings.event_path == "/tmp/event.json"
    assert settings.output_path == "/tmp/output"
    assert settings.token == "abc"
    assert settings.debug is True
    assert settings.json_report_path == "/tmp/report.json"
    assert settings.unicorn_delay == UNICORN_DELAY


def test_from_env_defaults():
    settings = Settings.from_env({"GITHUB_TOKEN": "", "RUNNER_DEBUG": "0"})
    assert settings.event_path is None
    assert settings.output_path is None
    assert settings.token is None
    assert settings.debug is False
