"""
可达性探测模块 - 先 HEAD 再按需 GET

判定规则：
1. HEAD 返回 2xx/3xx：可达
2. HEAD 返回 4xx：资源确认不存在，不再 GET
3. 其他情况（5xx 等）：回退到 GET，以 GET 的状态码为准
4. 任一阶段网络失败：不可达，无状态码

不重试，超时使用 httpx 默认值。
"""

import logging

import httpx

from pr_quality_checker.core.models import ProbeResult

logger = logging.getLogger(__name__)


async def probe(client: httpx.AsyncClient, url: str) -> ProbeResult:
    """探测 URL 是否可达"""
    try:
        head = await client.head(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug(f"HEAD {url} failed: {e}")
        return ProbeResult(ok=False)

    status = head.status_code
    logger.debug(f"HEAD {url} -> {status}")
    if 200 <= status < 400:
        return ProbeResult(ok=True, status=status)
    if 400 <= status < 500:
        return ProbeResult(ok=False, status=status)

    try:
        response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.debug(f"GET {url} failed: {e}")
        return ProbeResult(ok=False)

    logger.debug(f"GET {url} -> {response.status_code}")
    return ProbeResult(ok=response.status_code < 400, status=response.status_code)
