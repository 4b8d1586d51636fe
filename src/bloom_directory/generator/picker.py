"""Uniform, distinct and weighted selection driven by a random source."""

from typing import Callable, List, Sequence, Tuple, TypeVar
from ..logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')

RandomFn = Callable[[], float]


def pick_one(items: Sequence[T], random: RandomFn) -> T:
    """Pick a single item uniformly."""
    return items[int(random() * len(items))]


def shuffle(items: Sequence[T], random: RandomFn) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def pick_many(items: Sequence[T], count: int, random: RandomFn) -> List[T]:
    """
    Pick ``count`` distinct items without replacement.
    
    The whole sequence is shuffled before slicing, so the number of draws
    consumed depends only on ``len(items)``. The shuffle is Fisher-Yates, not
    a sort with a random comparator, so from the first call onwards the
    generated records differ from the JavaScript-generated dataset for the
    same seed even though the underlying random stream is identical.
    """
    return shuffle(items, random)[:count]


def pick_weighted(weights: Sequence[Tuple[T, float]], random: RandomFn) -> T:
    """
    Pick an item from a weighted distribution.
    
    Args:
        weights: Ordered ``(item, weight)`` pairs with non-negative weights
        random: Source of uniform floats in [0, 1)
        
    Returns:
        The selected item. If floating point residue keeps the draw above
        zero after the last weight, the last item is returned.
    """
    if not weights:
        raise ValueError("pick_weighted requires at least one (item, weight) pair")
    
    total = sum(weight for _, weight in weights)
    remaining = random() * total
    for item, weight in weights:
        remaining -= weight
        if remaining <= 0:
            return item
    
    logger.debug(f"Weighted pick fell through with residue {remaining!r}, using last item")
    return weights[-1][0]
