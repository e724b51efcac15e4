"""
Core Layer - 核心层

包含数据模型、链接提取器、可达性探测和 Forge API 访问。
"""

from pr_quality_checker.core.models import (
    Category,
    ErrorKind,
    Outcome,
    ProbeResult,
    Verdict,
    MISSING_VERDICT,
    CategoryResult,
    NoveltyVerdict,
    ExtractedLinks,
    Report,
)
from pr_quality_checker.core.extractor import (
    LinkRule,
    LINK_RULES,
    capture,
    extract_links,
)
from pr_quality_checker.core.prober import probe
from pr_quality_checker.core.forge import (
    ForgeClient,
    parse_repo_url,
    api_headers,
    fetch_json,
)

__all__ = [
    # models
    "Category",
    "ErrorKind",
    "Outcome",
    "ProbeResult",
    "Verdict",
    "MISSING_VERDICT",
    "CategoryResult",
    "NoveltyVerdict",
    "ExtractedLinks",
    "Report",
    # extractor
    "LinkRule",
    "LINK_RULES",
    "capture",
    "extract_links",
    # prober
    "probe",
    # forge
    "ForgeClient",
    "parse_repo_url",
    "api_headers",
    "fetch_json",
]
