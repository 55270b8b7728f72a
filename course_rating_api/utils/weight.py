import math
from collections.abc import Iterable
from typing import Protocol

from course_rating_api.exceptions import InvalidInput


class WeightedCriterion(Protocol):
    code: str
    weight: float


def standardize_weight(criteria: Iterable[WeightedCriterion]) -> dict[str, float]:
    """
    Нормирует веса критериев: вес каждого критерия делится на сумму всех весов.
    Возвращает словарь код критерия -> нормированный вес, сумма значений равна 1
    """
    criteria = list(criteria)
    if not criteria:
        raise InvalidInput("no criteria to standardize")
    weights: dict[str, float] = {}
    for criterion in criteria:
        if criterion.weight is None or not math.isfinite(criterion.weight) or criterion.weight <= 0:
            raise InvalidInput(f"criterion {criterion.code!r} has invalid weight {criterion.weight}")
        if criterion.code in weights:
            raise InvalidInput(f"criterion code {criterion.code!r} is duplicated")
        weights[criterion.code] = float(criterion.weight)
    # Делим на максимальный вес, чтобы сумма больших весов не переполнялась
    largest = max(weights.values())
    scaled = {code: weight / largest for code, weight in weights.items()}
    total = sum(scaled.values())
    return {code: weight / total for code, weight in scaled.items()}
