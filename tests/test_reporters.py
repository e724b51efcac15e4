"""报告器测试"""

import io
import json

from rich.console import Console

from pr_quality_checker.aggregator import build_report
from pr_quality_checker.core.models import (
    MISSING_VERDICT,
    Category,
    CategoryResult,
    NoveltyVerdict,
    Verdict,
)
from pr_quality_checker.reporters import JsonReporter, RichReporter


def _report():
    results = [
        CategoryResult(Category.REPOSITORY, "https://github.com/acme/widget", Verdict(True)),
        CategoryResult(Category.DOCUMENTATION, "", MISSING_VERDICT),
        CategoryResult(
            Category.QUALITY_REPORT,
            "https://goreportcard.com/report/github.com/acme/widget",
            Verdict(False, "grade C", {"grade": "C"}),
        ),
        CategoryResult(Category.COVERAGE, "https://codecov.io/gh/acme/widget", Verdict(True)),
    ]
    return build_report(results, NoveltyVerdict(True, "🦄✨ Approved"))


def test_json_reporter():
    buffer = io.StringIO()
    JsonReporter(buffer).report(_report())
    data = json.loads(buffer.getvalue())
    assert data["fail"] is True
    assert [r["category"] for r in data["results"]] == [
        "repository", "documentation", "quality_report", "coverage",
    ]
    assert data["results"][1]["missing"] is True
    assert data["results"][1]["link"] is None
    assert data["results"][2]["metadata"] == {"grade": "C"}
    assert data["novelty"] == {"approved": True, "message": "🦄✨ Approved"}
    assert data["comment"].startswith("- ✅ Repo: OK")


def test_rich_reporter_lists_every_category():
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, force_terminal=False)
    RichReporter(console).report(_report())
    output = buffer.getvalue()
    for label in ("Repo", "pkg.go.dev", "goreportcard", "coverage"):
        assert label in output
    assert "grade C" in output
    assert "Approved" in output
