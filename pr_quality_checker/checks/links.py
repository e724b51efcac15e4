"""
链接检查模块 - 文档、代码质量报告和覆盖率链接

文档与覆盖率链接只检查可达性；
代码质量报告还会抓取页面，从中解析 "Grade: X" 评级。
"""

import logging
import re
from typing import Optional

import httpx

from pr_quality_checker.core.models import Verdict
from pr_quality_checker.core.prober import probe

logger = logging.getLogger(__name__)

GRADE_PATTERN = re.compile(r"Grade:\s*([A-F][+-]?)", re.IGNORECASE)
PASSING_GRADE_PATTERN = re.compile(r"^A[-+]?$")

UNKNOWN_GRADE = "unknown"


async def _check_reachable(client: httpx.AsyncClient, url: str) -> Verdict:
    result = await probe(client, url)
    if result.ok:
        return Verdict(passed=True)
    return Verdict(passed=False, reason="unreachable")


async def check_doc_link(client: httpx.AsyncClient, url: str) -> Verdict:
    """文档链接：可达即通过"""
    return await _check_reachable(client, url)


async def check_coverage_link(client: httpx.AsyncClient, url: str) -> Verdict:
    """覆盖率链接：可达即通过"""
    return await _check_reachable(client, url)


def parse_grade(html: str) -> Optional[str]:
    """从页面文本中解析评级，找不到返回 None"""
    match = GRADE_PATTERN.search(html or "")
    if not match:
        return None
    return match.group(1).upper()


def is_passing_grade(grade: str) -> bool:
    """只有 A、A+、A- 算通过"""
    return bool(PASSING_GRADE_PATTERN.match(grade))


async def check_quality_report(client: httpx.AsyncClient, url: str) -> Verdict:
    """
    代码质量报告

    找不到评级标记时视为通过（grade 为 unknown）。
    """
    reachable = await probe(client, url)
    if not reachable.ok:
        return Verdict(passed=False, reason="unreachable")

    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"Failed to fetch quality report {url}: {e}")
        return Verdict(passed=False, reason="fetch error")

    grade = parse_grade(response.text)
    if grade is None:
        logger.info(f"No grade marker found at {url}")
        return Verdict(passed=True, metadata={"grade": UNKNOWN_GRADE})

    if is_passing_grade(grade):
        return Verdict(passed=True, metadata={"grade": grade})
    return Verdict(passed=False, reason=f"grade {grade}", metadata={"grade": grade})
