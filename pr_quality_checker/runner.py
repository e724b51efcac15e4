"""
编排模块 - 一次完整的检查流程

1. 从 PR 描述中提取链接
2. 并发执行各类别检查和独角兽审批
3. 缺失的链接直接给出 missing 结论，不发起任何请求
4. 按类别顺序汇总报告
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from pr_quality_checker.aggregator import build_report
from pr_quality_checker.checks import (
    check_coverage_link,
    check_doc_link,
    check_quality_report,
    check_repository,
    check_unicorn_approval,
)
from pr_quality_checker.config import Settings
from pr_quality_checker.core.extractor import extract_links
from pr_quality_checker.core.forge import ForgeClient
from pr_quality_checker.core.models import (
    MISSING_VERDICT,
    Category,
    CategoryResult,
    Report,
    Verdict,
)

logger = logging.getLogger(__name__)

CheckFn = Callable[[str], Awaitable[Verdict]]


def _category_checks(client: httpx.AsyncClient, settings: Settings) -> dict[Category, CheckFn]:
    forge = ForgeClient(client, token=settings.token)
    return {
        Category.REPOSITORY: lambda url: check_repository(forge, url),
        Category.DOCUMENTATION: lambda url: check_doc_link(client, url),
        Category.QUALITY_REPORT: lambda url: check_quality_report(client, url),
        Category.COVERAGE: lambda url: check_coverage_link(client, url),
    }


async def _run_category(category: Category, url: str, check: CheckFn) -> CategoryResult:
    if not url:
        logger.info(f"{category.missing_label} not found in PR description")
        return CategoryResult(category=category, link="", verdict=MISSING_VERDICT)

    logger.info(f"Checking {category.label}: {url}")
    verdict = await check(url)
    logger.debug(f"{category.label} verdict: {verdict}")
    return CategoryResult(category=category, link=url, verdict=verdict)


async def run_checks(
    body: str,
    settings: Settings,
    client: Optional[httpx.AsyncClient] = None,
) -> Report:
    """
    执行所有检查

    Args:
        body: PR 描述
        settings: 运行配置
        client: HTTP 客户端（测试时注入，未提供时自动创建并关闭）

    Returns:
        Report
    """
    if client is None:
        async with httpx.AsyncClient() as owned:
            return await run_checks(body, settings, owned)

    links = extract_links(body)
    checks = _category_checks(client, settings)

    category_tasks = [
        _run_category(category, links.get(category), checks[category])
        for category in Category
    ]
    *results, novelty = await asyncio.gather(
        *category_tasks,
        check_unicorn_approval(delay=settings.unicorn_delay),
    )
    return build_report(results, novelty)


def run(body: str, settings: Settings) -> Report:
    """同步入口"""
    return asyncio.run(run_checks(body, settings))
