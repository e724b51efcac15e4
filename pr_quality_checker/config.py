"""
配置模块 - 从环境变量读取运行配置

检查器没有命令行参数，所有配置都来自 CI 注入的环境变量。
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


# ============================================================
# 配置常量
# ============================================================

# Forge API
FORGE_HOST = "github.com"
FORGE_API_BASE = "https://api.github.com"
FORGE_HEADERS: dict[str, str] = {
    "User-Agent": "chaotic-go-bot/0.666",
    "Accept": "application/vnd.github+json",
}

# 仓库根目录下必须存在的清单文件
MANIFEST_FILENAME = "go.mod"

# 独角兽审批
UNICORN_DELAY = 1.0
UNICORN_REJECT_THRESHOLD = 0.001

_TRUTHY = {"1", "true", "yes", "on"}


def _non_empty(value: Optional[str]) -> Optional[str]:
    return value if value else None


@dataclass
class Settings:
    """
    运行配置

    Attributes:
        event_path: 触发事件 JSON 文件路径 (GITHUB_EVENT_PATH)
        output_path: CI 输出文件路径 (GITHUB_OUTPUT)
        token: Forge API 的 bearer token (GITHUB_TOKEN)
        debug: 是否输出调试日志 (RUNNER_DEBUG)
        json_report_path: JSON 报告输出路径 (PR_QUALITY_JSON_REPORT)
        unicorn_delay: 独角兽审批前的等待秒数
    """
    event_path: Optional[str] = None
    output_path: Optional[str] = None
    token: Optional[str] = None
    debug: bool = False
    json_report_path: Optional[str] = None
    unicorn_delay: float = UNICORN_DELAY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """从环境变量构建配置"""
        env = os.environ if environ is None else environ
        return cls(
            event_path=_non_empty(env.get("GITHUB_EVENT_PATH")),
            output_path=_non_empty(env.get("GITHUB_OUTPUT")),
            token=_non_empty(env.get("GITHUB_TOKEN")),
            debug=env.get("RUNNER_DEBUG", "").strip().lower() in _TRUTHY,
            json_report_path=_non_empty(env.get("PR_QUALITY_JSON_REPORT")),
        )
