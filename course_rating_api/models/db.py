from __future__ import annotations

import datetime
from enum import Enum

from sqlalchemy import JSON, Boolean, DateTime
from sqlalchemy import Enum as DbEnum
from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseDbModel


class EvaluationType(str, Enum):
    PFR: str = "pfr"
    LIKERT: str = "likert"


class Category(BaseDbModel):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Идентификатор категории")
    name: Mapped[str] = mapped_column(String, nullable=False, unique=True, comment="Название категории")
    courses: Mapped[list[Course]] = relationship("Course", back_populates="category")


class Course(BaseDbModel):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Идентификатор курса")
    name: Mapped[str] = mapped_column(String, nullable=False, comment="Название курса")
    description: Mapped[str] = mapped_column(String, nullable=True, comment="Описание курса")
    link: Mapped[str] = mapped_column(String, nullable=True, comment="Ссылка на курс")
    thumbnail: Mapped[str] = mapped_column(
        String, nullable=False, default='/images/course_2.jpg', server_default='/images/course_2.jpg'
    )
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("category.id"), nullable=True)
    category: Mapped[Category] = relationship("Category", back_populates="courses")
    user_id: Mapped[int] = mapped_column(Integer, nullable=True, comment="Идентификатор автора курса")
    pfr: Mapped[dict] = mapped_column(
        JSON, nullable=True, comment="PFR-профиль курса: код критерия -> agreement/neutral/disagreement"
    )
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, comment="Активен ли курс")
    evaluations: Mapped[list[Evaluation]] = relationship("Evaluation", back_populates="course")


class CriteriaType(BaseDbModel):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    is_using: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, comment="Участвуют ли критерии этого типа в рейтинге"
    )
    criteria: Mapped[list[Criteria]] = relationship("Criteria", back_populates="type")


class Criteria(BaseDbModel):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    code: Mapped[str] = mapped_column(String, nullable=False, unique=True, comment="Код критерия в PFR-профиле")
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(String, nullable=True)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=1.0, comment="Вес критерия")
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("criteria_type.id"), nullable=False)
    type: Mapped[CriteriaType] = relationship("CriteriaType", back_populates="criteria")
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class Evaluation(BaseDbModel):
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    course_id: Mapped[int] = mapped_column(Integer, ForeignKey("course.id"), nullable=False)
    course: Mapped[Course] = relationship("Course", back_populates="evaluations")
    user_id: Mapped[int] = mapped_column(Integer, nullable=True)
    criteria_type: Mapped[int] = mapped_column(Integer, ForeignKey("criteria_type.id"), nullable=False)
    type: Mapped[EvaluationType] = mapped_column(DbEnum(EvaluationType, native_enum=False), nullable=False)
    create_ts: Mapped[datetime.datetime] = mapped_column(DateTime, default=datetime.datetime.utcnow, nullable=False)
