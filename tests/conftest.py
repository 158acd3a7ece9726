"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from domain.value_objects.actor import Actor, ProjectDetails
from domain.value_objects.user_role import ProjectRole, UserRole
from tests.mocks import OTHER_USER_ID, OWNER_ID, PROJECT_ID


@pytest.fixture
def project() -> ProjectDetails:
    """Return the project the requests are scoped to, seen by a member."""
    return ProjectDetails(
        project_id=PROJECT_ID,
        project_name="demo",
        project_role=ProjectRole.MEMBER,
    )


@pytest.fixture
def manager_project() -> ProjectDetails:
    """Return the same project seen by a project manager."""
    return ProjectDetails(
        project_id=PROJECT_ID,
        project_name="demo",
        project_role=ProjectRole.PROJECT_MANAGER,
    )


@pytest.fixture
def customer_project() -> ProjectDetails:
    return ProjectDetails(
        project_id=PROJECT_ID,
        project_name="demo",
        project_role=ProjectRole.CUSTOMER,
    )


@pytest.fixture
def owner() -> Actor:
    """Return the user who started the launches used in tests."""
    return Actor(user_id=OWNER_ID, username="owner")


@pytest.fixture
def stranger() -> Actor:
    """Return a regular user who owns nothing."""
    return Actor(user_id=OTHER_USER_ID, username="stranger")


@pytest.fixture
def admin() -> Actor:
    return Actor(user_id=1, username="superadmin", user_role=UserRole.ADMINISTRATOR)
