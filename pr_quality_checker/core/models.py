"""
数据模型模块 - 检查流程中流转的所有结构

包括：
1. 链接类别（固定的评估顺序）
2. 边界读取结果 Outcome（事件文件、Forge JSON）
3. 单项检查结论 Verdict 与类别结果 CategoryResult
4. 非权威的独角兽结论 NoveltyVerdict
5. 最终报告 Report
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# ============================================================
# 枚举
# ============================================================

class Category(Enum):
    """链接类别，定义顺序即报告顺序"""
    REPOSITORY = "repository"
    DOCUMENTATION = "documentation"
    QUALITY_REPORT = "quality_report"
    COVERAGE = "coverage"

    @property
    def label(self) -> str:
        """报告行中的显示名"""
        return CATEGORY_LABELS[self]

    @property
    def missing_label(self) -> str:
        """链接缺失时的显示名"""
        return MISSING_LABELS[self]


CATEGORY_LABELS: dict[Category, str] = {
    Category.REPOSITORY: "Repo",
    Category.DOCUMENTATION: "pkg.go.dev",
    Category.QUALITY_REPORT: "goreportcard",
    Category.COVERAGE: "coverage",
}

MISSING_LABELS: dict[Category, str] = {
    Category.REPOSITORY: "Repo link",
    Category.DOCUMENTATION: "pkg.go.dev",
    Category.QUALITY_REPORT: "goreportcard",
    Category.COVERAGE: "coverage",
}


class ErrorKind(Enum):
    """错误分类"""
    EXTRACTION_MISS = "extraction_miss"     # 描述中找不到链接
    NETWORK_FAILURE = "network_failure"     # 连接/DNS/TLS 错误或响应解析失败
    SEMANTIC_FAILURE = "semantic_failure"   # 可访问但不满足类别规则
    INPUT_FAILURE = "input_failure"         # 事件文件缺失或无法解析


# ============================================================
# 边界读取结果
# ============================================================

@dataclass(frozen=True)
class Outcome:
    """
    跨边界读取的结果

    成功时 value 有值、error 为 None；失败时由调用方决定默认值。

    Attributes:
        value: 读取到的值
        error: 错误分类
        detail: 错误描述（用于日志）
    """
    value: Any = None
    error: Optional[ErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, value: Any) -> "Outcome":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, detail: str = "") -> "Outcome":
        return cls(error=error, detail=detail)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: Any) -> Any:
        """成功返回 value，失败返回 default"""
        return self.value if self.ok else default


# ============================================================
# 检查结论
# ============================================================

@dataclass(frozen=True)
class ProbeResult:
    """可达性探测结果，网络失败时 status 为 None"""
    ok: bool
    status: Optional[int] = None


@dataclass(frozen=True)
class Verdict:
    """
    单个类别的检查结论

    Attributes:
        passed: 是否通过
        reason: 失败原因（如 "invalid repo url"）
        metadata: 附加诊断信息（如 {"grade": "A"}）
    """
    passed: bool
    reason: Optional[str] = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def grade(self) -> Optional[str]:
        return self.metadata.get("grade")


MISSING_VERDICT = Verdict(passed=False, reason="missing")


@dataclass(frozen=True)
class CategoryResult:
    """某个类别的链接及其结论"""
    category: Category
    link: str
    verdict: Verdict

    @property
    def missing(self) -> bool:
        return not self.link


@dataclass(frozen=True)
class NoveltyVerdict:
    """
    独角兽审批结论

    只用于展示，不是 Verdict，不参与 fail 标记的计算。
    """
    approved: bool
    message: str


@dataclass
class ExtractedLinks:
    """从 PR 描述中提取的链接，缺失的类别为空字符串"""
    links: dict[Category, str] = field(default_factory=dict)

    def get(self, category: Category) -> str:
        return self.links.get(category, "")

    def missing(self) -> list[Category]:
        return [c for c in Category if not self.get(c)]


@dataclass
class Report:
    """
    最终报告

    Attributes:
        lines: 展示行（按类别顺序，独角兽行在最后）
        critical_failure: 任一必检类别失败即为 True
        results: 按类别顺序排列的结果
        novelty: 独角兽结论（可选）
    """
    lines: list[str]
    critical_failure: bool
    results: list[CategoryResult] = field(default_factory=list)
    novelty: Optional[NoveltyVerdict] = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
