import functools
import logging
from collections.abc import Collection

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from course_rating_api.exceptions import DataSourceError
from course_rating_api.models import Course, Criteria, CriteriaType, Evaluation, EvaluationType


logger = logging.getLogger(__name__)


def _db_errors(method):
    @functools.wraps(method)
    def wrapper(*args, **kwargs):
        try:
            return method(*args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"{method.__name__} failed: {e}")
            raise DataSourceError(method.__name__) from e

    return wrapper


class SqlCourseSource:
    """Данные для рейтинга курсов из базы"""

    def __init__(self, session: Session):
        self.session = session

    @_db_errors
    def active_criteria_type_ids(self, excluded_type_id: int) -> set[int]:
        rows = (
            self.session.query(CriteriaType.id)
            .filter(CriteriaType.is_using.is_(True), CriteriaType.id != excluded_type_id)
            .all()
        )
        return {row.id for row in rows}

    @_db_errors
    def eligible_course_ids(self, type_ids: Collection[int], minimum_evaluation_count: int) -> set[int]:
        if not type_ids:
            return set()
        rows = (
            self.session.query(Evaluation.course_id)
            .filter(Evaluation.criteria_type.in_(list(type_ids)), Evaluation.type == EvaluationType.PFR)
            .group_by(Evaluation.course_id)
            .having(func.count(Evaluation.id) >= minimum_evaluation_count)
            .all()
        )
        return {row.course_id for row in rows}

    @_db_errors
    def active_criteria(self, type_ids: Collection[int]) -> list[Criteria]:
        if not type_ids:
            return []
        return (
            Criteria.query(session=self.session)
            .filter(Criteria.type_id.in_(list(type_ids)))
            .order_by(Criteria.id)
            .all()
        )

    @_db_errors
    def active_courses(self, ids: Collection[int] | None = None, limit: int | None = None) -> list[Course]:
        courses = Course.query(session=self.session).options(joinedload(Course.category))
        if ids is not None:
            courses = courses.filter(Course.id.in_(list(ids)))
        courses = courses.order_by(Course.id)
        if limit is not None:
            courses = courses.limit(limit)
        return courses.all()
