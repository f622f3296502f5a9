import logging

logger = logging.getLogger(__name__)


class UserStore:
    """In-memory collection of User records, kept in insertion order.

    No locking: callers are expected to handle one request at a time.
    """

    def __init__(self):
        self._users = []

    def __len__(self):
        return len(self._users)

    def all(self):
        """Return every user in insertion order."""
        return list(self._users)

    def search(self, query=None):
        """Return users whose name or email contains ``query`` (case-sensitive)."""
        if not query:
            return self.all()
        return [u for u in self._users if query in u.name or query in u.email]

    def get(self, user_id):
        """Return the user with ``user_id``, or None when there is none."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def create(self, user):
        """Assign the next id to ``user`` and append it.

        The next id is max(existing ids) + 1, so deleting the newest record
        lets its id be handed out again.
        """
        if self._users:
            user.id = max(u.id for u in self._users) + 1
        else:
            user.id = 1
        self._users.append(user)
        logger.debug("Stored user id=%d", user.id)
        return user

    def update(self, user_id, changes):
        """Copy name and email from ``changes`` onto the stored user.

        Returns the updated user, or None when ``user_id`` is unknown.
        """
        existing = self.get(user_id)
        if existing is None:
            return None
        existing.name = changes.name
        existing.email = changes.email
        return existing

    def delete(self, user_id):
        """Remove the user with ``user_id``; unknown ids are ignored.

        Returns True when a record was removed.
        """
        for index, user in enumerate(self._users):
            if user.id == user_id:
                del self._users[index]
                return True
        return False
