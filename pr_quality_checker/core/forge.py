"""
Forge API 模块 - 解析仓库 URL 并读取仓库元数据

所有读取都返回 Outcome：网络错误和 JSON 解析失败不会抛出，
由调用方决定如何降级。
"""

import json
import logging
from typing import Optional
from urllib.parse import urlsplit

import httpx

from pr_quality_checker.config import FORGE_API_BASE, FORGE_HEADERS, FORGE_HOST
from pr_quality_checker.core.models import ErrorKind, Outcome

logger = logging.getLogger(__name__)


def parse_repo_url(url: str) -> Optional[tuple[str, str]]:
    """
    解析仓库 URL

    Args:
        url: 仓库链接，如 https://github.com/owner/repo

    Returns:
        (owner, repo)，主机不是 Forge 或路径不完整时返回 None
    """
    try:
        parts = urlsplit(url)
        hostname = parts.hostname
    except ValueError:
        return None

    if hostname != FORGE_HOST:
        return None

    segments = parts.path.split("/")
    if len(segments) < 3:
        return None
    owner, repo = segments[1], segments[2]
    if not owner or not repo:
        return None
    return owner, repo


def api_headers(token: Optional[str] = None) -> dict[str, str]:
    """构建 API 请求头，有 token 时附加认证"""
    headers = dict(FORGE_HEADERS)
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    headers: Optional[dict[str, str]] = None,
) -> Outcome:
    """
    GET 并解码 JSON

    不检查状态码：Forge 的错误响应本身也是 JSON，由调用方按字段判断。
    """
    try:
        response = await client.get(url, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning(f"Network error while fetching {url}: {e}")
        return Outcome.failure(ErrorKind.NETWORK_FAILURE, str(e))

    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"JSON parse failed for {url}: {e}")
        return Outcome.failure(ErrorKind.NETWORK_FAILURE, f"invalid JSON: {e}")

    if data is None:
        return Outcome.failure(ErrorKind.NETWORK_FAILURE, "empty JSON document")
    return Outcome.success(data)


class ForgeClient:
    """Forge REST API 客户端"""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: Optional[str] = None,
        base_url: str = FORGE_API_BASE,
    ):
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.headers = api_headers(token)

    async def _get(self, path: str) -> Outcome:
        return await fetch_json(self.client, f"{self.base_url}{path}", self.headers)

    async def repository(self, owner: str, repo: str) -> Outcome:
        """仓库元数据"""
        return await self._get(f"/repos/{owner}/{repo}")

    async def contents(self, owner: str, repo: str, path: str) -> Outcome:
        """仓库内文件的元数据"""
        return await self._get(f"/repos/{owner}/{repo}/contents/{path}")

    async def releases(self, owner: str, repo: str) -> Outcome:
        """发布列表"""
        return await self._get(f"/repos/{owner}/{repo}/releases")
