from fastapi import APIRouter
from fastapi_sqlalchemy import db

from course_rating_api.exceptions import ObjectNotFound
from course_rating_api.models import Criteria
from course_rating_api.schemas.models import CriterionGet, CriterionGetAll
from course_rating_api.services.course_source import SqlCourseSource
from course_rating_api.settings import Settings, get_settings
from course_rating_api.utils.weight import standardize_weight


settings: Settings = get_settings()
criteria = APIRouter(prefix="/criteria", tags=["Criteria"])


@criteria.get("", response_model=CriterionGetAll)
async def get_criteria() -> CriterionGetAll:
    """
    Возвращает критерии, которые участвуют в рейтинге курсов, с исходными и нормированными весами
    """
    source = SqlCourseSource(db.session)
    active_criteria = source.active_criteria(source.active_criteria_type_ids(settings.EXCLUDED_CRITERIA_TYPE_ID))
    if not active_criteria:
        raise ObjectNotFound(Criteria, 'all')
    weights = standardize_weight(active_criteria)
    result = CriterionGetAll(total=len(active_criteria))
    for criterion in active_criteria:
        criterion_to_result = CriterionGet.model_validate(criterion)
        criterion_to_result.standardized_weight = weights[criterion.code]
        result.criteria.append(criterion_to_result)
    return result
