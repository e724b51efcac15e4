"""
CI 边界模块 - 读取触发事件，写出步骤输出

事件文件读取失败时返回 INPUT_FAILURE，由调用方替换为空描述；
输出使用 GITHUB_OUTPUT 的 heredoc 格式，支持多行值。
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pr_quality_checker.config import Settings
from pr_quality_checker.core.models import ErrorKind, Outcome, Report

logger = logging.getLogger(__name__)

OUTPUT_DELIMITER = "EOF"


def read_event(path: Optional[str]) -> Outcome:
    """读取事件 JSON"""
    if not path:
        logger.warning("🔥 No event path configured. Returning empty sadness.")
        return Outcome.failure(ErrorKind.INPUT_FAILURE, "event path not set")

    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"🔥 Couldn't read event {path}: {e}")
        return Outcome.failure(ErrorKind.INPUT_FAILURE, str(e))

    try:
        return Outcome.success(json.loads(content))
    except json.JSONDecodeError as e:
        logger.warning(f"🔥 Couldn't parse event {path}: {e}")
        return Outcome.failure(ErrorKind.INPUT_FAILURE, str(e))


def pull_request_body(event: Any) -> str:
    """取出 PR 描述，结构不符时返回空字符串"""
    if not isinstance(event, dict):
        return ""
    pull_request = event.get("pull_request")
    if not isinstance(pull_request, dict):
        return ""
    body = pull_request.get("body")
    return body if isinstance(body, str) else ""


def set_output(path: Optional[str], name: str, value: str) -> None:
    """
    追加一个步骤输出

    Raises:
        OSError: 输出文件无法写入
    """
    if not path:
        logger.info(f"GITHUB_OUTPUT not set, skipping output '{name}'")
        return
    with open(path, "a", encoding="utf-8") as f:
        f.write(f"{name}<<{OUTPUT_DELIMITER}\n{value}\n{OUTPUT_DELIMITER}\n")


def publish(report: Report, settings: Settings) -> None:
    """写出 comment 和 fail 两个输出"""
    set_output(settings.output_path, "comment", report.text)
    set_output(settings.output_path, "fail", "true" if report.critical_failure else "false")
