from warden_identity.application.services.authentication_service import (
    AuthenticationService,
)
from warden_identity.application.services.user_profile_service import (
    UserProfileService,
)

__all__ = ["AuthenticationService", "UserProfileService"]
