"""
PR-Quality-Checker - 检查 PR 描述中的外部链接是否达标

从 PR 描述中提取仓库、文档、代码质量报告和覆盖率链接，
逐个验证后输出 Markdown 报告和 fail 标记。
"""

__version__ = "0.6.66"
