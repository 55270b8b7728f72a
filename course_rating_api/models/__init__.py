from .base import Base, BaseDbModel
from .db import Category, Course, Criteria, CriteriaType, Evaluation, EvaluationType


__all__ = ["Base", "BaseDbModel", "Category", "Course", "Criteria", "CriteriaType", "Evaluation", "EvaluationType"]
