# core/identity.py
import logging

from .signals import identity_changed

logger = logging.getLogger("studio.sync")


def user_identity(user):
    """
    Opaque identity string of a Django user; None for anonymous users.

    Always the primary key; linking a Supabase account does not change it.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    return str(user.pk)


class IdentityProvider:
    """
    Holds the active user id and announces changes through ``identity_changed``.

    Authentication happens elsewhere; this only records the outcome.
    """

    def __init__(self, user_id=None):
        self._user_id = user_id

    @property
    def current_user_id(self):
        return self._user_id

    def set_user(self, user_id):
        user_id = user_id or None
        if user_id == self._user_id:
            return
        previous, self._user_id = self._user_id, user_id
        logger.info(f"Identity changed: {previous} -> {user_id}")
        identity_changed.send(sender=self, user_id=user_id, previous_user_id=previous)

    def login(self, user):
        self.set_user(user_identity(user))

    def logout(self):
        self.set_user(None)
