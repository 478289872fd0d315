import dataclasses

from .conf import get_option


def is_admin(user):
    if not getattr(user, "is_authenticated", False):
        return False
    return bool(
        user.is_staff
        or user.is_superuser
        or user.groups.filter(name=get_option("ADMIN_GROUP")).exists()
    )


@dataclasses.dataclass(frozen=True)
class Identity:
    is_authenticated: bool = False
    has_elevated_capability: bool = False

    @classmethod
    def anonymous(cls):
        return cls()

    @classmethod
    def from_user(cls, user):
        if user is None or not user.is_authenticated:
            return cls.anonymous()
        return cls(is_authenticated=True, has_elevated_capability=is_admin(user))
