import math
from collections.abc import Mapping

from course_rating_api.exceptions import NumericDomainError
from course_rating_api.utils.pfr import FuzzyProfile, Membership, PfrProfile


def _check_domain(name: str, value: float) -> None:
    if not 0 <= value <= 1:
        raise NumericDomainError(name, value)


def _cross_term(value: float, mean: float) -> float:
    # x * ln(x / x) -> 0, поэтому нулевой числитель или знаменатель дают 0
    if value == 0 or mean == 0:
        return 0.0
    return value * math.log(value / mean)


def element_entropy(membership: float, best: float, weight: float) -> float:
    """Взвешенная кросс-энтропия одной степени принадлежности курса относительно идеала"""
    _check_domain("membership", membership)
    _check_domain("best", best)
    if membership == 1:
        return 0.0
    mean = 0.5 * (membership + best)
    return weight * (_cross_term(membership, mean) + _cross_term(1 - membership, 1 - mean))


def criterion_entropy(profile: FuzzyProfile, best: FuzzyProfile, weight: float) -> float:
    return sum(element_entropy(profile.value(m), best.value(m), weight) for m in Membership)


def course_entropy(pfr: PfrProfile, ideal: Mapping[str, FuzzyProfile], weights: Mapping[str, float]) -> float:
    """
    Суммарная энтропия курса по всем критериям идеального профиля.
    Чем меньше значение, тем ближе курс к идеалу
    """
    return sum(criterion_entropy(pfr[code], best, weights[code]) for code, best in ideal.items())
