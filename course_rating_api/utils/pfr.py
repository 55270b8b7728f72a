from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from course_rating_api.exceptions import DataSourceError


class Membership(str, Enum):
    AGREEMENT: str = "agreement"
    NEUTRAL: str = "neutral"
    DISAGREEMENT: str = "disagreement"


class FuzzyProfile(BaseModel):
    """Оценка курса по одному критерию: три степени принадлежности из [0, 1]"""

    agreement: float = 0.0
    neutral: float = 0.0
    disagreement: float = 0.0

    model_config = ConfigDict(frozen=True)

    def value(self, membership: Membership) -> float:
        return getattr(self, membership.value)


ZERO_PROFILE = FuzzyProfile()


class PfrProfile(dict[str, FuzzyProfile]):
    """PFR-профиль курса: код критерия -> FuzzyProfile.
    Для отсутствующего кода возвращается нулевой профиль, а не KeyError.
    """

    def __missing__(self, code: str) -> FuzzyProfile:
        return ZERO_PROFILE

    @classmethod
    def from_raw(cls, raw: Any) -> "PfrProfile":
        """Разбирает json из колонки `course.pfr`. Отсутствующие ключи принадлежности считаются нулями"""
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise DataSourceError(f"PFR profile must be a mapping, got {type(raw).__name__}")
        profile = cls()
        for code, memberships in raw.items():
            if not isinstance(memberships, Mapping):
                raise DataSourceError(f"PFR entry {code!r} must be a mapping")
            try:
                profile[code] = FuzzyProfile.model_validate(
                    {m.value: memberships[m.value] for m in Membership if m.value in memberships}
                )
            except ValidationError as e:
                raise DataSourceError(f"PFR entry {code!r} is malformed: {e.error_count()} errors") from e
        return profile
