from course_rating_api.schemas.base import Base


class CategoryGet(Base):
    id: int
    name: str


class CourseGet(Base):
    id: int
    name: str
    description: str | None = None
    link: str | None = None
    thumbnail: str | None = None
    category: CategoryGet | None = None
    entropy: float | None = None


class CourseGetAll(Base):
    courses: list[CourseGet] = []
    limit: int
    total: int
    fallback: bool = False


class CriterionGet(Base):
    id: int
    code: str
    name: str
    type_id: int
    weight: float
    standardized_weight: float | None = None


class CriterionGetAll(Base):
    criteria: list[CriterionGet] = []
    total: int
