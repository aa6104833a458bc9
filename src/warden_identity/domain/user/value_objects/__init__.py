from warden_identity.domain.user.value_objects.user_patch import UserPatch
from warden_identity.domain.user.value_objects.user_role import UserRole

__all__ = ["UserPatch", "UserRole"]
