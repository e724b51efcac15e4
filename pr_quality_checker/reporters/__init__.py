"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from pr_quality_checker.reporters.base import Reporter
from pr_quality_checker.reporters.rich_reporter import RichReporter
from pr_quality_checker.reporters.json_reporter import JsonReporter, report_to_dict

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
    "report_to_dict",
]
