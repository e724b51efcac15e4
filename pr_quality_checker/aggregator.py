"""
报告汇总模块 - 把各类别的结论汇总成 Markdown 行和 fail 标记

行的顺序固定为类别顺序，与检查完成的先后无关。
独角兽结论只追加展示行，fail 标记只由四个必检类别决定。
"""

from typing import Iterable, Optional

from pr_quality_checker.core.models import (
    Category,
    CategoryResult,
    NoveltyVerdict,
    Report,
)

PASS_ICON = "✅"
FAIL_ICON = "❌"


def _known_grade(result: CategoryResult) -> Optional[str]:
    grade = result.verdict.grade
    if grade and grade != "unknown":
        return grade
    return None


def format_result_line(result: CategoryResult) -> str:
    """
    格式化单个类别的展示行

    Examples:
        - ❌ Repo link: missing
        - ✅ goreportcard: OK (grade A+)
        - ❌ pkg.go.dev: FAIL (unreachable)
    """
    category = result.category
    if result.missing:
        return f"- {FAIL_ICON} {category.missing_label}: missing"

    grade = _known_grade(result)
    if result.verdict.passed:
        suffix = f" (grade {grade})" if grade else ""
        return f"- {PASS_ICON} {category.label}: OK{suffix}"

    reason = result.verdict.reason or (f"grade {grade}" if grade else "unknown")
    return f"- {FAIL_ICON} {category.label}: FAIL ({reason})"


def format_novelty_line(novelty: NoveltyVerdict) -> str:
    return f"- 🦄 Unicorn approval: {novelty.message}"


def build_report(
    results: Iterable[CategoryResult],
    novelty: Optional[NoveltyVerdict] = None,
) -> Report:
    """
    汇总报告

    Args:
        results: 每个类别恰好一个结果（顺序任意）
        novelty: 独角兽结论（可选，不影响 fail）

    Returns:
        Report

    Raises:
        ValueError: 类别重复或缺失
    """
    by_category: dict[Category, CategoryResult] = {}
    for result in results:
        if result.category in by_category:
            raise ValueError(f"Duplicate result for category: {result.category.value}")
        by_category[result.category] = result

    absent = [c.value for c in Category if c not in by_category]
    if absent:
        raise ValueError(f"Missing results for categories: {', '.join(absent)}")

    ordered = [by_category[c] for c in Category]
    lines = [format_result_line(r) for r in ordered]
    critical_failure = any(r.missing or not r.verdict.passed for r in ordered)

    if novelty is not None:
        lines.append(format_novelty_line(novelty))

    return Report(
        lines=lines,
        critical_failure=critical_failure,
        results=ordered,
        novelty=novelty,
    )
