"""
Рейтинг курсов по PFR-оценкам.

Курс допускается к рейтингу, если по нему набрано не меньше MIN_NUMBER_EVALUATION
PFR-оценок учитываемых типов критериев. Для допущенных курсов строится идеальный
профиль, затем для каждого курса считается суммарная кросс-энтропия относительно
идеала. Курсы сортируются по возрастанию энтропии, при равенстве по id.
"""

import logging
from collections.abc import Collection, Sequence
from typing import Any, Protocol

from pydantic import BaseModel, Field

from course_rating_api.exceptions import DataSourceError, InvalidInput
from course_rating_api.settings import get_settings
from course_rating_api.utils.entropy import course_entropy
from course_rating_api.utils.ideal import build_ideal_profile
from course_rating_api.utils.pfr import FuzzyProfile, PfrProfile
from course_rating_api.utils.weight import WeightedCriterion, standardize_weight


logger = logging.getLogger(__name__)


class CourseDataSource(Protocol):
    def active_criteria_type_ids(self, excluded_type_id: int) -> set[int]: ...

    def eligible_course_ids(self, type_ids: Collection[int], minimum_evaluation_count: int) -> set[int]: ...

    def active_criteria(self, type_ids: Collection[int]) -> Sequence[WeightedCriterion]: ...

    def active_courses(self, ids: Collection[int] | None = None, limit: int | None = None) -> Sequence[Any]: ...


class RankedCourse(BaseModel):
    course: Any
    entropy: float | None = None


class RankingResult(BaseModel):
    courses: list[RankedCourse] = Field(default_factory=list)
    ideal: dict[str, FuzzyProfile] = Field(default_factory=dict)
    weights: dict[str, float] = Field(default_factory=dict)
    fallback: bool = False


class CourseRankingEngine:
    def __init__(
        self,
        source: CourseDataSource,
        *,
        min_number_evaluation: int | None = None,
        excluded_criteria_type_id: int | None = None,
    ):
        settings = get_settings()
        self.source = source
        self.min_number_evaluation = (
            settings.MIN_NUMBER_EVALUATION if min_number_evaluation is None else min_number_evaluation
        )
        self.excluded_criteria_type_id = (
            settings.EXCLUDED_CRITERIA_TYPE_ID if excluded_criteria_type_id is None else excluded_criteria_type_id
        )

    def rank(self, limit: int | None = None) -> RankingResult:
        """
        Ранжирует допущенные курсы от лучшего к худшему.

        `limit` - максимальное количество курсов в ответе, None - весь пул.
        Если ни один курс не набрал нужного числа оценок, возвращаются первые `limit`
        активных курсов без ранжирования и `fallback=True`.
        Допущенные по числу оценок, но неактивные курсы молча отбрасываются: источник
        отдает только активные курсы, ошибкой это не считается.
        """
        if limit is not None and limit < 1:
            raise InvalidInput(f"limit must be positive, got {limit}")

        type_ids = self.source.active_criteria_type_ids(self.excluded_criteria_type_id)
        eligible_ids = self.source.eligible_course_ids(type_ids, self.min_number_evaluation)
        logger.info(f"{len(eligible_ids)} courses have at least {self.min_number_evaluation} PFR evaluations")

        if not eligible_ids:
            logger.info("No eligible courses, returning unranked active courses")
            courses = self.source.active_courses(limit=limit)
            return RankingResult(courses=[RankedCourse(course=course) for course in courses], fallback=True)

        courses = self.source.active_courses(ids=eligible_ids)
        if not courses:
            return RankingResult()
        unexpected = {course.id for course in courses} - set(eligible_ids)
        if unexpected:
            raise DataSourceError(f"courses {sorted(unexpected)} were not requested")

        weights = standardize_weight(self.source.active_criteria(type_ids))
        profiles = {course.id: PfrProfile.from_raw(course.pfr) for course in courses}
        ideal = build_ideal_profile(profiles.values(), weights.keys())

        ranked = []
        for course in courses:
            entropy = course_entropy(profiles[course.id], ideal, weights)
            logger.debug(f"Course {course.id} entropy={entropy}")
            ranked.append(RankedCourse(course=course, entropy=entropy))
        ranked.sort(key=lambda r: (r.entropy, r.course.id))

        return RankingResult(courses=ranked[:limit], ideal=ideal, weights=weights)

    def top_courses(self, limit: int) -> list[Any]:
        return [ranked.course for ranked in self.rank(limit).courses]
