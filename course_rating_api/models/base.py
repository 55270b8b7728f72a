from __future__ import annotations

import re

from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Query, Session, as_declarative, declared_attr

from course_rating_api.exceptions import ObjectNotFound


@as_declarative()
class Base:
    """Base class for all database entities"""

    @declared_attr
    def __tablename__(cls) -> str:  # pylint: disable=no-self-argument
        """Generate database table name automatically.
        Convert CamelCase class name to snake_case db table name.
        """
        return re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__name__).lower()

    def __repr__(self):
        attrs = []
        for c in self.__table__.columns:
            attrs.append(f"{c.name}={getattr(self, c.name)}")
        return "{}({})".format(self.__class__.__name__, ', '.join(attrs))


class BaseDbModel(Base):
    __abstract__ = True

    @classmethod
    def query(cls, *, session: Session) -> Query:
        """Get all objects, only active ones if the model has a status"""
        objs = session.query(cls)
        if hasattr(cls, "status"):
            objs = objs.filter(cls.status.is_(True))
        return objs

    @classmethod
    def get(cls, id: int, *, session: Session) -> BaseDbModel:
        """Get object by id, only active one if the model has a status"""
        try:
            return cls.query(session=session).filter(cls.id == id).one()
        except NoResultFound:
            raise ObjectNotFound(cls, id)
