from enum import Enum


class DefaultRole(str, Enum):
    SYSTEM = "system"
    ADMIN = "admin"


class PermissionName(str, Enum):
    MANAGE_AUTHORIZATION = "manage authorization"

    USER_LIST = "user list"
    USER_SHOW = "user show"
    USER_STORE = "user store"
    USER_UPDATE = "user update"

    ROLE_LIST = "role list"
    ROLE_SHOW = "role show"
    ROLE_STORE = "role store"
    ROLE_UPDATE = "role update"
    ROLE_DESTROY = "role destroy"

    PERMISSION_LIST = "permission list"
    PERMISSION_SHOW = "permission show"
