"""测试公共夹具 - 基于 httpx.MockTransport 的假网络"""

from typing import Callable, Optional

import httpx
import pytest


class FakeNetwork:
    """
    按 (方法, URL) 返回预设响应，并记录所有请求

    未注册的 URL 抛出 ConnectError，模拟网络失败。
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, url: str, status: int = 200, **kwargs) -> None:
        """注册响应，kwargs 透传给 httpx.Response（json=, text=, ...）"""
        self.routes[(method.upper(), url)] = lambda request: httpx.Response(status, **kwargs)

    def add_handler(self, method: str, url: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method.upper(), url)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, str(request.url)))
        if route is None:
            raise httpx.ConnectError("no route", request=request)
        return route(request)

    def calls(self, method: Optional[str] = None) -> list[str]:
        return [
            f"{r.method} {r.url}"
            for r in self.requests
            if method is None or r.method == method
        ]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def network() -> FakeNetwork:
    return FakeNetwork()
