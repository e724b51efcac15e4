"""
日志配置模块 - 使用 RichHandler 输出到 stderr

默认 INFO 级别；RUNNER_DEBUG 开启时输出 DEBUG 并放开 httpx 的日志。
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(debug: bool = False) -> None:
    """安装唯一的 Rich 日志处理器"""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    root.addHandler(handler)

    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
