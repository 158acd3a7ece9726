from pydantic import BaseModel


class UserFilter(BaseModel):
    """Saved launch/test item filter a widget can be built on."""

    filter_id: int
    project_id: int
    owner: str
    name: str
    shared: bool = False

    def is_permitted_for(self, username: str) -> bool:
        return self.shared or self.owner == username
