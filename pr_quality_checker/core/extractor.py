"""
链接提取器模块 - 从 PR 描述中按标签提取各类别的链接

每个类别由一条规则描述：标签正则 + 允许的域名。
同一类别只取第一个匹配（已知限制：重复或冲突的链接会被忽略）。
"""

import re
from dataclasses import dataclass
from typing import Optional

from pr_quality_checker.core.models import Category, ExtractedLinks


# ============================================================
# 数据模型
# ============================================================

@dataclass(frozen=True)
class LinkRule:
    """
    链接提取规则

    Attributes:
        category: 链接类别
        label: 标签正则（如 "pkg\\.go\\.dev:"）
        hosts: 允许的域名
    """
    category: Category
    label: str
    hosts: tuple[str, ...]

    @property
    def pattern(self) -> re.Pattern:
        hosts = "|".join(re.escape(host) for host in self.hosts)
        return re.compile(
            rf"{self.label}\s*(https?://(?:{hosts})/\S+)",
            re.IGNORECASE,
        )


# ============================================================
# 配置常量
# ============================================================

LINK_RULES: list[LinkRule] = [
    LinkRule(
        Category.REPOSITORY,
        r"forge\s+link[^:]*:",
        ("github.com", "gitlab.com", "bitbucket.org"),
    ),
    LinkRule(Category.DOCUMENTATION, r"pkg\.go\.dev:", ("pkg.go.dev",)),
    LinkRule(Category.QUALITY_REPORT, r"goreportcard\.com:", ("goreportcard.com",)),
    LinkRule(Category.COVERAGE, r"coverage[^:]*:", ("coveralls.io", "codecov.io")),
]


# ============================================================
# 提取函数
# ============================================================

def capture(text: Optional[str], pattern: re.Pattern) -> str:
    """
    返回第一个匹配的 URL（去除首尾空白），找不到时返回空字符串

    Args:
        text: PR 描述
        pattern: 带一个捕获组的正则

    Returns:
        URL 或 ""
    """
    if not text or not isinstance(text, str):
        return ""
    match = pattern.search(text)
    if not match or not match.group(1):
        return ""
    return match.group(1).strip()


def extract_links(text: Optional[str], rules: Optional[list[LinkRule]] = None) -> ExtractedLinks:
    """对每条规则执行提取"""
    rules = rules if rules is not None else LINK_RULES
    return ExtractedLinks(
        links={rule.category: capture(text, rule.pattern) for rule in rules}
    )
