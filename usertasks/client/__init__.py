"""Resource controllers of the bridge API and the UserTasksClient facade."""

from usertasks.client.admin import AdminController
from usertasks.client.api_client import UserTasksClient
from usertasks.client.base import paginate
from usertasks.client.group_management import GroupManagementController
from usertasks.client.init import InitController
from usertasks.client.public import PublicController
from usertasks.client.user import UserController
from usertasks.client.user_management import UserManagementController

__all__ = [
    "UserTasksClient",
    "AdminController",
    "GroupManagementController",
    "InitController",
    "PublicController",
    "UserController",
    "UserManagementController",
    "paginate",
]
