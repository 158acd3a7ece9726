from .launch import Launch
from .project import Project
from .test_item import TestItem
from .user_filter import UserFilter
from .widget import Widget

__all__ = ["Launch", "Project", "TestItem", "UserFilter", "Widget"]
