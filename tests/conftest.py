import importlib
import sys
from functools import lru_cache
from pathlib import Path

import pytest
from _pytest.monkeypatch import MonkeyPatch
from alembic import command
from alembic.config import Config as AlembicConfig
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from testcontainers.postgres import PostgresContainer

from course_rating_api.models import (
    Base,
    Category,
    Course,
    Criteria,
    CriteriaType,
    Evaluation,
    EvaluationType,
)
from course_rating_api.routes import app
from course_rating_api.settings import Settings, get_settings


PROFILE_A = {"agreement": 0.9, "neutral": 0.05, "disagreement": 0.05}
PROFILE_B = {"agreement": 0.5, "neutral": 0.3, "disagreement": 0.2}
PROFILE_C = {"agreement": 0.2, "neutral": 0.4, "disagreement": 0.4}
PROFILE_SHARED = {"agreement": 0.6, "neutral": 0.2, "disagreement": 0.1}


class PostgresConfig:
    """Дата-класс со значениями для контейнера с тестовой БД и alembic-миграции."""

    container_name: str = "course_rating_test"
    username: str = "postgres"
    host: str = "localhost"
    image: str = "postgres:15"
    external_port: int = 5433
    ham: str = "trust"
    alembic_ini: Path = Path(__file__).resolve().parent.parent / "alembic.ini"

    @classmethod
    def get_url(cls):
        """Возвращает URI для подключения к БД."""
        return f"postgresql://{cls.username}@{cls.host}:{cls.external_port}/{cls.container_name}"


@pytest.fixture(scope="session")
def session_mp():
    """Аналог monkeypatch, но с session-scope."""
    mp = MonkeyPatch()
    yield mp
    mp.undo()


@pytest.fixture(scope="session")
def get_settings_mock(session_mp):
    """Переопределение get_settings в course_rating_api/settings.py и перезагрузка base.app."""

    @lru_cache
    def get_test_settings() -> Settings:
        settings = Settings()
        settings.DB_DSN = PostgresConfig.get_url()
        return settings

    get_settings.cache_clear()
    dsn_mock = session_mp.setattr("course_rating_api.settings.get_settings", get_test_settings)
    reloaded_module = sys.modules["course_rating_api.routes.base"]
    importlib.reload(reloaded_module)
    importlib.reload(sys.modules["course_rating_api.routes.exc_handlers"])
    globals()["app"] = reloaded_module.app
    return dsn_mock


@pytest.fixture(scope="session")
def db_container(get_settings_mock):
    """Фикстура настройки БД для тестов в Docker-контейнере, схема создается alembic-миграциями."""
    container = (
        PostgresContainer(
            image=PostgresConfig.image,
            username=PostgresConfig.username,
            dbname=PostgresConfig.container_name,
        )
        .with_bind_ports(5432, PostgresConfig.external_port)
        .with_env("POSTGRES_HOST_AUTH_METHOD", PostgresConfig.ham)
    )
    container.start()
    cfg = AlembicConfig(str(PostgresConfig.alembic_ini))
    cfg.set_main_option("script_location", "%(here)s/migrations")
    command.upgrade(cfg, "head")
    try:
        yield PostgresConfig.get_url()
    finally:
        container.stop()


@pytest.fixture()
def dbsession(db_container):
    """Фикстура настройки Session для работы с БД в тестах, после теста все таблицы очищаются."""
    engine = create_engine(str(db_container), pool_pre_ping=True)
    TestingSessionLocal = sessionmaker(bind=engine)
    session = TestingSessionLocal()
    yield session
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()
    engine.dispose()


@pytest.fixture
def client(dbsession):
    return TestClient(app)


@pytest.fixture
def criteria(dbsession):
    """
    Типы критериев: 1 - используется, 2 - отключен, 3 - исключен из рейтинга настройкой.
    В рейтинге участвуют только c1 (вес 2) и c2 (вес 6).
    """
    dbsession.add_all(
        [
            CriteriaType(id=1, name="content", is_using=True),
            CriteriaType(id=2, name="archive", is_using=False),
            CriteriaType(id=3, name="instructor", is_using=True),
        ]
    )
    dbsession.flush()
    _criteria = [
        Criteria(id=1, code="c1", name="Полнота", weight=2, type_id=1),
        Criteria(id=2, code="c2", name="Понятность", weight=6, type_id=1),
        Criteria(id=3, code="c_archive", name="Архивный", weight=5, type_id=2),
        Criteria(id=4, code="c_instructor", name="Преподаватель", weight=4, type_id=3),
        Criteria(id=5, code="c_inactive", name="Неактивный", weight=3, type_id=1, status=False),
    ]
    dbsession.add_all(_criteria)
    dbsession.commit()
    yield _criteria


@pytest.fixture
def courses(dbsession):
    """
    Курсы A, B, C с профилями по c1 из сценария, у всех одинаковый профиль по c2.
    D неактивен, E активен и без профиля.
    """
    category = Category(id=1, name="Программирование")
    dbsession.add(category)
    dbsession.flush()
    courses_data = [
        (1, "A", {"c1": PROFILE_A, "c2": PROFILE_SHARED}, True),
        (2, "B", {"c1": PROFILE_B, "c2": PROFILE_SHARED}, True),
        (3, "C", {"c1": PROFILE_C, "c2": PROFILE_SHARED}, True),
        (4, "D", {"c1": {"agreement": 1, "neutral": 0, "disagreement": 0}}, False),
        (5, "E", None, True),
    ]
    _courses = [
        Course(id=course_id, name=name, pfr=pfr, status=status, category_id=category.id)
        for course_id, name, pfr, status in courses_data
    ]
    dbsession.add_all(_courses)
    dbsession.commit()
    yield _courses


@pytest.fixture
def evaluations(dbsession, criteria, courses):
    """
    A, B, C и неактивный D набирают по 5 PFR-оценок используемого типа.
    E набирает 4 такие оценки и еще оценки, которые не засчитываются.
    """
    evaluations_data = [(course_id, 1, EvaluationType.PFR, 5) for course_id in (1, 2, 3, 4)]
    evaluations_data += [
        (5, 1, EvaluationType.PFR, 4),
        (5, 1, EvaluationType.LIKERT, 3),
        (5, 2, EvaluationType.PFR, 3),
        (5, 3, EvaluationType.PFR, 3),
    ]
    _evaluations = [
        Evaluation(course_id=course_id, criteria_type=type_id, type=evaluation_type, user_id=n)
        for course_id, type_id, evaluation_type, count in evaluations_data
        for n in range(count)
    ]
    dbsession.add_all(_evaluations)
    dbsession.commit()
    yield _evaluations
