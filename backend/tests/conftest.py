import json
import sqlite3

import pytest
from fastapi.testclient import TestClient

from advocate_directory.database import get_engine, get_session_factory, init_db
from advocate_directory.dependencies import get_session_factory as provide_session_factory
from advocate_directory.main import app
from advocate_directory.repositories.advocate_repository import AdvocateRepository

ADVOCATES = [
    (1, "John", "Smith", "New York", "MD", ["Anxiety", "ADHD"], 10, 5551234567),
    (2, "Jane", "Doe", "Chicago", "PhD", ["Trauma", "Bipolar"], 5, 5552345678),
    (3, "Johnny", "Appleseed", "Boston", "LCSW", ["ADHD"], 3, 5553456789),
    (4, "Maria", "Garcia", "Austin", "PsyD", ["Anxiety", "Trauma"], 15, 5554567890),
    (5, "Wei", "Chen", "Seattle", "MSW", ["Sleep issues"], 8, 5555678901),
    (6, "Sam", "Johnson", "Denver", "LPC", [], 0, 5556789012),
    (7, "Priya", "Patel", "Miami", "NP", ["Eating disorders", "Anxiety"], 12, 5557890123),
    (8, "Eve", "Austin", "Portland", "MD", ["Chronic pain"], 20, 5558901234),
]


def insert_advocates(db_path, advocates):
    conn = sqlite3.connect(str(db_path))
    conn.executemany(
        """
        INSERT INTO advocates (id, first_name, last_name, city, degree, specialties,
                               years_of_experience, phone_number, created_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, '2024-01-01T00:00:00Z')
        """,
        [
            (id_, first, last, city, degree, json.dumps(tags), years, phone)
            for id_, first, last, city, degree, tags, years, phone in advocates
        ],
    )
    conn.commit()
    conn.close()


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "advocates.sqlite"
    init_db(path)
    return path


@pytest.fixture
def seeded_db(db_path):
    insert_advocates(db_path, ADVOCATES)
    return db_path


@pytest.fixture
def session_factory(seeded_db):
    engine = get_engine(seeded_db)
    yield get_session_factory(engine)
    engine.sync_engine.dispose()


@pytest.fixture
def repository(session_factory):
    return AdvocateRepository(session_factory)


@pytest.fixture
def client(session_factory):
    app.dependency_overrides[provide_session_factory] = lambda: session_factory
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()
