"""
独角兽审批模块 - 一个完全没有必要的检查 🦄

99.9% 的独角兽都很开心。结果只出现在报告里，不影响 fail 标记。
"""

import asyncio
import logging
import random
from typing import Optional

from pr_quality_checker.config import UNICORN_DELAY, UNICORN_REJECT_THRESHOLD
from pr_quality_checker.core.models import NoveltyVerdict

logger = logging.getLogger(__name__)

APPROVED_MESSAGE = "🦄✨ Approved"
REJECTED_MESSAGE = "🦄💔 Rejected"


async def check_unicorn_approval(
    delay: float = UNICORN_DELAY,
    rng: Optional[random.Random] = None,
) -> NoveltyVerdict:
    """执行独角兽审批"""
    logger.info("🦄 Performing Unicorn Approval Check...")
    if delay > 0:
        # 悬念
        await asyncio.sleep(delay)
    roll = (rng or random).random()
    approved = roll > UNICORN_REJECT_THRESHOLD
    return NoveltyVerdict(
        approved=approved,
        message=APPROVED_MESSAGE if approved else REJECTED_MESSAGE,
    )
