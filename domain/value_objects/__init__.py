from .actor import Actor, ProjectDetails
from .attachment import Attachment
from .keep_screenshots_delay import KeepScreenshotsDelay
from .launch_mode import LaunchMode
from .status import Status
from .test_item_type import TestItemType
from .user_role import ProjectRole, UserRole
from .widget_activity import WidgetActivity

__all__ = [
    "Actor",
    "Attachment",
    "KeepScreenshotsDelay",
    "LaunchMode",
    "ProjectDetails",
    "ProjectRole",
    "Status",
    "TestItemType",
    "UserRole",
    "WidgetActivity",
]
