"""Pytest configuration and global fixtures for Workboard tests.

Every test gets its own in-memory SQLite database. Fixtures build the
repositories and services on top of it, plus a couple of users and a
project so tests can start from a realistic state.
"""

import os

# Fast bcrypt and a known environment before any settings are loaded
os.environ["APP_ENV"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key-for-workboard-tests-only"
os.environ["JWT_EXPIRES_IN"] = "1h"
os.environ["DB_PATH"] = ":memory:"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from workboard.c1_database_session import DatabaseManager, generate_id, utcnow
from workboard.c1_project_models import Project
from workboard.c1_user_models import User
from workboard.c2_auth_service import AuthService, create_access_token, hash_password
from workboard.c2_project_service import ProjectService
from workboard.c2_repositories import ProjectRepository, UserRepository, WorkItemRepository
from workboard.c2_work_item_service import WorkItemService
from workboard.c3_app import create_app
from workboard.core.config import reload_settings

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture(autouse=True)
def app_settings():
    """Rebuild settings from the test environment for every test."""
    return reload_settings()


@pytest.fixture
def db_manager():
    """Provide a fresh in-memory database with all tables created."""
    manager = DatabaseManager(":memory:")
    manager.create_tables()
    yield manager
    manager.drop_tables()
    manager.dispose()


def make_user(db_manager, email, name="Test User", role="developer", password=TEST_PASSWORD):
    """Insert a user row directly and return it."""
    now = utcnow()
    user = User(
        id=generate_id(),
        email=email,
        name=name,
        password_hash=hash_password(password),
        role=role,
        created_at=now,
        updated_at=now,
    )
    with db_manager.session_scope() as db:
        db.add(user)
    return user


def make_project(db_manager, owner, name="Test Project"):
    """Insert a project row directly and return it."""
    now = utcnow()
    project = Project(
        id=generate_id(),
        name=name,
        description="",
        owner_id=owner.id,
        status="active",
        created_at=now,
        updated_at=now,
    )
    with db_manager.session_scope() as db:
        db.add(project)
    return project


@pytest.fixture
def user_repository(db_manager):
    return UserRepository(db_manager)


@pytest.fixture
def project_repository(db_manager):
    return ProjectRepository(db_manager)


@pytest.fixture
def work_item_repository(db_manager):
    return WorkItemRepository(db_manager)


@pytest.fixture
def project_service(project_repository):
    return ProjectService(project_repository)


@pytest.fixture
def work_item_service(work_item_repository, project_service):
    return WorkItemService(work_item_repository, project_service)


@pytest.fixture
def auth_service(user_repository):
    return AuthService(user_repository)


@pytest.fixture
def owner(db_manager):
    """User who owns the default project."""
    return make_user(db_manager, "owner@example.com", name="Project Owner", role="manager")


@pytest.fixture
def outsider(db_manager):
    """User with no access to the default project."""
    return make_user(db_manager, "outsider@example.com", name="Outsider")


@pytest.fixture
def project(db_manager, owner):
    return make_project(db_manager, owner)


@pytest.fixture
def client(db_manager, app_settings):
    """TestClient bound to the per-test database."""
    app = create_app(settings=app_settings, db_manager=db_manager)
    with TestClient(app) as test_client:
        yield test_client


def auth_headers(user):
    """Authorization header for a user."""
    token = create_access_token(user.id, user.email, user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def owner_headers(owner):
    return auth_headers(owner)


@pytest.fixture
def outsider_headers(outsider):
    return auth_headers(outsider)


@pytest.fixture
def user_factory(db_manager):
    """Create extra users: ``user_factory("dev@example.com", role="developer")``."""

    def _create(email, **kwargs):
        return make_user(db_manager, email, **kwargs)

    return _create


@pytest.fixture
def project_factory(db_manager):
    """Create extra projects: ``project_factory(owner, name="Other")``."""

    def _create(owner_user, **kwargs):
        return make_project(db_manager, owner_user, **kwargs)

    return _create


@pytest.fixture
def headers_for():
    """Build an Authorization header for any user."""
    return auth_headers
