from collections.abc import Iterable

from course_rating_api.exceptions import InvalidInput
from course_rating_api.utils.pfr import FuzzyProfile, PfrProfile


def build_ideal_profile(profiles: Iterable[PfrProfile], codes: Iterable[str]) -> dict[str, FuzzyProfile]:
    """
    Строит идеальный профиль по пулу курсов: для каждого критерия
    максимальное agreement и минимальные neutral и disagreement.
    Курс без записи по критерию участвует нулевым профилем
    """
    profiles = list(profiles)
    if not profiles:
        raise InvalidInput("ideal profile needs at least one course")
    ideal: dict[str, FuzzyProfile] = {}
    for code in codes:
        observed = [profile[code] for profile in profiles]
        ideal[code] = FuzzyProfile(
            agreement=max(p.agreement for p in observed),
            neutral=min(p.neutral for p in observed),
            disagreement=min(p.disagreement for p in observed),
        )
    return ideal
