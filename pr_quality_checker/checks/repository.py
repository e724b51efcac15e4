"""
仓库检查模块 - 验证 Forge 仓库是否是一个合格的 Go 项目

检查顺序（遇到第一个失败即返回）：
1. URL 必须指向 Forge 且包含 owner/repo
2. 仓库元数据可以读取
3. 仓库未归档
4. 根目录存在 go.mod，且至少有一个语义化版本的 release
"""

import asyncio
import logging
import re

from pr_quality_checker.config import MANIFEST_FILENAME
from pr_quality_checker.core.forge import ForgeClient, parse_repo_url
from pr_quality_checker.core.models import Outcome, Verdict

logger = logging.getLogger(__name__)

# vMAJOR.MINOR.PATCH 前缀，后缀（预发布/构建信息）不参与匹配
SEMVER_TAG_PATTERN = re.compile(r"^v\d+\.\d+\.\d+")


def has_manifest(contents: Outcome) -> bool:
    """文件元数据的 name 字段必须与清单文件名完全一致"""
    data = contents.unwrap_or(None)
    return isinstance(data, dict) and data.get("name") == MANIFEST_FILENAME


def has_semver_release(releases: Outcome) -> bool:
    """至少一个 release 的 tag 符合语义化版本"""
    data = releases.unwrap_or(None)
    if not isinstance(data, list):
        return False
    for release in data:
        if not isinstance(release, dict):
            continue
        tag = release.get("tag_name") or ""
        if isinstance(tag, str) and SEMVER_TAG_PATTERN.match(tag):
            return True
    return False


async def check_repository(forge: ForgeClient, url: str) -> Verdict:
    """验证仓库链接"""
    parsed = parse_repo_url(url)
    if not parsed:
        return Verdict(passed=False, reason="invalid repo url")
    owner, repo = parsed

    metadata = await forge.repository(owner, repo)
    if not metadata.ok or not isinstance(metadata.value, dict):
        return Verdict(passed=False, reason="repo api not reachable")

    if metadata.value.get("archived"):
        logger.info(f"{owner}/{repo} is archived")
        return Verdict(passed=False, reason="repo is archived and also smells old")

    contents, releases = await asyncio.gather(
        forge.contents(owner, repo, MANIFEST_FILENAME),
        forge.releases(owner, repo),
    )
    manifest_ok = has_manifest(contents)
    release_ok = has_semver_release(releases)

    if not manifest_ok:
        return Verdict(passed=False, reason=f"missing {MANIFEST_FILENAME}")
    if not release_ok:
        return Verdict(passed=False, reason="missing semver release")
    return Verdict(passed=True)
