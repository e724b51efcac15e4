"""
Checks Layer - 检查层

每个类别一个检查函数，统一返回 Verdict；独角兽审批返回 NoveltyVerdict。
"""

from pr_quality_checker.checks.repository import (
    check_repository,
    has_manifest,
    has_semver_release,
)
from pr_quality_checker.checks.links import (
    check_doc_link,
    check_coverage_link,
    check_quality_report,
    parse_grade,
    is_passing_grade,
)
from pr_quality_checker.checks.unicorn import check_unicorn_approval

__all__ = [
    # repository
    "check_repository",
    "has_manifest",
    "has_semver_release",
    # links
    "check_doc_link",
    "check_coverage_link",
    "check_quality_report",
    "parse_grade",
    "is_passing_grade",
    # unicorn
    "check_unicorn_approval",
]
