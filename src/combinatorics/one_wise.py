import math
import random
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from combinatorics.log import get_logger

logger = get_logger(__name__)

V = TypeVar("V")

PADDING_POLICIES = ("random", "cyclic")


def generate(
    categories: Mapping[str, Sequence[V]],
    random_fn: Optional[Callable[[], float]] = None,
    padding: str = "random",
) -> List[Dict[str, V]]:
    """
    1-wise (Each Choice): jeder Wert jeder Kategorie kommt in mindestens
    einem Testfall vor.

    Zeile i nimmt pro Kategorie den Wert an Position i. Ist die Liste einer
    Kategorie kürzer als i, wird aufgefüllt:
    - padding="random": zufälliger Wert aus der Liste (random_fn, Standard
      random.random), für jede Zelle neu gezogen
    - padding="cyclic": Wert an Position i % len (random_fn wird nicht gerufen)

    Kategorien mit leerer Werteliste fehlen in allen Testfällen. Es entsteht
    immer mindestens ein Testfall, ggf. ein leeres Dict.

        generate({"foo": ["x", "y"], "bar": ["a", "b", "c"]})
        # [{"foo": "x", "bar": "a"}, {"foo": "y", "bar": "b"}, {"foo": <x|y>, "bar": "c"}]
    """
    if padding not in PADDING_POLICIES:
        raise ValueError(f"Unknown padding policy: {padding!r} (allowed: {', '.join(PADDING_POLICIES)})")
    fn = random_fn or random.random

    max_len = 1
    for values in categories.values():
        max_len = max(max_len, len(values))

    testcases: List[Dict[str, V]] = []
    padded = 0
    for i in range(max_len):
        tc: Dict[str, V] = {}
        for key, values in categories.items():
            n = len(values)
            if n == 0:
                continue
            if i < n:
                tc[key] = values[i]
            elif padding == "cyclic":
                tc[key] = values[i % n]
                padded += 1
            else:
                tc[key] = values[_random_before(n, fn)]
                padded += 1
        testcases.append(tc)

    logger.debug(
        "one-wise: %d categories -> %d testcases (%d padded cells, padding=%s)",
        len(categories), len(testcases), padded, padding,
    )
    return testcases


def _random_before(n: int, random_fn: Callable[[], float]) -> int:
    """Zufälliger Index in [0, n-1] aus random_fn() in [0, 1)."""
    idx = math.floor(random_fn() * n)
    # Negative Indizes würden in Python still von hinten zählen
    if not 0 <= idx < n:
        raise IndexError(f"Random index {idx} out of range for {n} values; random_fn must return values in [0, 1)")
    return idx
