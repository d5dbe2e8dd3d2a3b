"""
乱序器单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_randomizer.py -v
"""

import math
import random
from collections import Counter

from tilebook.assembler import Randomizer


class TestRandomizer:
    """乱序测试"""

    def test_same_elements(self):
        paths = [f"img_{i}.png" for i in range(20)]
        shuffled = list(paths)
        Randomizer(random.Random(7)).shuffle(shuffled)
        assert sorted(shuffled) == sorted(paths)
        assert len(shuffled) == len(paths)

    def test_empty_and_single(self):
        empty: list[str] = []
        Randomizer().shuffle(empty)
        assert empty == []

        single = ["only.png"]
        Randomizer().shuffle(single)
        assert single == ["only.png"]

    def test_uniform_permutations(self):
        """k=3 时6种排列近似等概率，顺序改变的比例约为 1 - 1/3!"""
        randomizer = Randomizer(random.Random(20240501))
        original = ["a", "b", "c"]
        trials = 6000

        counts: Counter[tuple[str, ...]] = Counter()
        for _ in range(trials):
            items = list(original)
            randomizer.shuffle(items)
            counts[tuple(items)] += 1

        assert len(counts) == math.factorial(3)
        expected = trials / math.factorial(3)
        for count in counts.values():
            assert abs(count - expected) < expected * 0.2

        changed = trials - counts[tuple(original)]
        assert abs(changed / trials - (1 - 1 / math.factorial(3))) < 0.03
