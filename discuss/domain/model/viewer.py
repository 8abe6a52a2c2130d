"""The person currently looking at a discussion."""

from discuss.domain.model.common import DomainModel
from discuss.domain.value import UserId, UserRole


class Viewer(DomainModel):
    """Identity and role of the signed-in viewer.

    Supplied by the session provider at render time. Nothing caches it, so a
    session change is picked up by the next render.
    """

    user_id: UserId
    role: UserRole = UserRole.USER

    @property
    def is_moderator(self) -> bool:
        return self.role.is_moderator
