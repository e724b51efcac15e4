"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from pr_quality_checker.core.models import Report


class Reporter(Protocol):
    """报告器协议"""

    def report(self, report: Report) -> None:
        """生成报告"""
        ...
