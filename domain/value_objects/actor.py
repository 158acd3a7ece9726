from pydantic import BaseModel

from domain.value_objects.user_role import ProjectRole, UserRole


class ProjectDetails(BaseModel):
    """Project the current request is scoped to, with the actor's role in it."""

    project_id: int
    """Identifier of the project named by the request."""

    project_name: str = ""
    """Human readable project name, used only for messages."""

    project_role: ProjectRole = ProjectRole.MEMBER
    """Role the actor holds in this project."""

    model_config = {"frozen": True}


class Actor(BaseModel):
    """Authenticated user performing an operation.

    The global role travels with the actor so that authorization decisions
    never consult ambient state.
    """

    user_id: int
    username: str
    user_role: UserRole = UserRole.USER

    model_config = {"frozen": True}

    @property
    def is_administrator(self) -> bool:
        return self.user_role == UserRole.ADMINISTRATOR
