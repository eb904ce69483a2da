import os

# Settings are read at import time, so the test environment goes in first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ.pop("COURSES_SEED_FILE", None)

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from main import create_app
from talentshine.core.database import Database
from talentshine.core.hasher import PasswordHelper
from talentshine.models.course import Course
from talentshine.models.enrollment import Enrollment
from talentshine.models.user import User


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.connect()
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def app(database):
    return create_app(database)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_user(database):
    counter = {"n": 0}

    def _make_user(balance=0, phone=None, password="secret123", **fields):
        counter["n"] += 1
        n = counter["n"]
        with database.session() as db:
            user = User(
                first_name=fields.pop("first_name", "Rahim"),
                last_name=fields.pop("last_name", f"Uddin{n}"),
                email=fields.pop("email", f"user{n}@example.com"),
                phone=phone if phone is not None else f"0171100000{n}",
                password=PasswordHelper.hash_password(password),
                balance=Decimal(str(balance)),
                **fields,
            )
            db.add(user)
            db.commit()
            return user.id

    return _make_user


@pytest.fixture
def make_course(database):
    def _make_course(price=0, title="Spoken English", **fields):
        with database.session() as db:
            course = Course(
                title=title,
                price=None if price is None else Decimal(str(price)),
                image=fields.pop("image", "https://example.com/course.jpg"),
                description=fields.pop("description", "Speak with confidence"),
                topics=fields.pop("topics", ["Greetings", "Pronunciation"]),
                google_meet=fields.pop("google_meet", "https://meet.google.com/abc"),
                **fields,
            )
            db.add(course)
            db.commit()
            return course.id

    return _make_course


@pytest.fixture
def get_balance(database):
    def _get_balance(user_id):
        with database.session() as db:
            return db.get(User, user_id).balance

    return _get_balance


@pytest.fixture
def count_enrollments(database):
    def _count(user_id=None):
        with database.session() as db:
            query = db.query(Enrollment)
            if user_id is not None:
                query = query.filter(Enrollment.user_id == user_id)
            return query.count()

    return _count
