"""
乱序器 - 对图片列表做均匀随机排列
"""

from __future__ import annotations

import random
from typing import Any


class Randomizer:
    """Fisher-Yates 原地洗牌（每种排列等概率），不对外暴露种子"""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def shuffle(self, items: list[Any]) -> None:
        """原地打乱"""
        self._rng.shuffle(items)
