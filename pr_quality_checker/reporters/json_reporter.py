"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import Any, TextIO

from pr_quality_checker.core.models import Report


def report_to_dict(report: Report) -> dict[str, Any]:
    """把报告转换为可序列化的字典"""
    return {
        "fail": report.critical_failure,
        "results": [
            {
                "category": result.category.value,
                "link": result.link or None,
                "missing": result.missing,
                "passed": result.verdict.passed,
                "reason": result.verdict.reason,
                "metadata": dict(result.verdict.metadata),
            }
            for result in report.results
        ],
        "novelty": (
            {
                "approved": report.novelty.approved,
                "message": report.novelty.message,
            }
            if report.novelty is not None
            else None
        ),
        "comment": report.text,
    }


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, report: Report) -> None:
        """生成 JSON 格式报告"""
        json_str = json.dumps(report_to_dict(report), indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
