from fastapi import APIRouter, Query
from fastapi_sqlalchemy import db

from course_rating_api.models import Course
from course_rating_api.schemas.models import CourseGet, CourseGetAll
from course_rating_api.services.course_source import SqlCourseSource
from course_rating_api.services.ranking import CourseRankingEngine
from course_rating_api.settings import Settings, get_settings


settings: Settings = get_settings()
course = APIRouter(prefix="/course", tags=["Course"])


@course.get("/top", response_model=CourseGetAll)
async def get_top_courses(
    limit: int | None = Query(default=None, ge=1, le=settings.MAX_TOP_COURSES_LIMIT)
) -> CourseGetAll:
    """
    Возвращает лучшие курсы по PFR-рейтингу, от лучшего к худшему

    `limit` - максимальное количество возвращаемых курсов, по умолчанию `TOP_COURSES_LIMIT`

    `entropy` у каждого курса - расстояние до идеального профиля, чем меньше, тем лучше.
    Если ни один курс не набрал минимального числа оценок, возвращаются активные курсы
    без ранжирования, `fallback=true`, `entropy=null`.
    """
    limit = limit or settings.TOP_COURSES_LIMIT
    ranking = CourseRankingEngine(SqlCourseSource(db.session)).rank(limit)
    result = CourseGetAll(limit=limit, total=len(ranking.courses), fallback=ranking.fallback)
    for ranked in ranking.courses:
        course_to_result = CourseGet.model_validate(ranked.course)
        course_to_result.entropy = ranked.entropy
        result.courses.append(course_to_result)
    return result


@course.get("/{id}", response_model=CourseGet)
async def get_course(id: int) -> CourseGet:
    """
    Возвращает активный курс по его ID вместе с категорией
    """
    return CourseGet.model_validate(Course.get(id, session=db.session))
