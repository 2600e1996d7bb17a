from __future__ import annotations

import os
import sys
import threading
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parent.parent
sys.path.append(str(ROOT))

# Configure the app before any module reads settings
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PASS_THRESHOLD"] = "0.7"

from database import Base  # noqa: E402
from models import assessment, certificate, course as course_models, log, notice, progress, users  # noqa: E402,F401
from services import assessments, catalog, identity  # noqa: E402
from storage.memory import MemoryStore  # noqa: E402
from storage.sql import SqlStore  # noqa: E402


@pytest.fixture()
def db_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return MemoryStore()
    return SqlStore(request.getfixturevalue("db_session"))


@pytest.fixture(params=["memory", "sql"])
def store_factory(request, tmp_path):
    """Returns a callable giving each worker thread its own store over one shared database."""
    if request.param == "memory":
        shared = MemoryStore()
        yield lambda: shared
        return

    # A file database, so every thread gets its own connection
    engine = create_engine(
        f"sqlite+pysqlite:///{tmp_path / 'portal.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    ThreadSession = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
    sessions = []

    def make_store():
        session = ThreadSession()
        sessions.append(session)
        return SqlStore(session)

    try:
        yield make_store
    finally:
        for session in sessions:
            session.close()
        engine.dispose()


@pytest.fixture()
def run_concurrently():
    """Start `count` threads calling target(i) together; returns the exceptions they raised."""
    def run(target, count):
        failures = []
        barrier = threading.Barrier(count)

        def worker(i):
            try:
                barrier.wait()
                target(i)
            except Exception as exc:  # noqa: BLE001 - collected for the assertion
                failures.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return failures

    return run


@pytest.fixture()
def course(store):
    return catalog.create_course(
        store,
        course_id="course-1",
        title="Aerial work platform safety",
        description="Harness rules and emergency procedures",
        type="workplace-safety",
        duration=7,
    )


@pytest.fixture()
def quiz(store, course):
    """Two questions; correct answers are 0 and 2."""
    return [
        assessments.create_question(
            store, course.id, question="Most important rule?",
            options=["Wear a harness", "Work faster", "Skip inspection"], correct_answer=0,
        ),
        assessments.create_question(
            store, course.id, question="Before lifting?",
            options=["Nothing", "Call a friend", "Check the outriggers"], correct_answer=2,
        ),
    ]


@pytest.fixture()
def user(store):
    return identity.register(
        store, username="alice", email="alice@x.com", password="secret123", department="Safety",
    )
