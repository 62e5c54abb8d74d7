"""
Admin gate.

A single shared password guards the privileged operations: deleting a
record and clearing or resetting the collection. This is a UI gate, not
an authentication system.
"""

import hmac
import logging

logger = logging.getLogger(__name__)


class AdminGate:
    """Checks candidate passwords against the configured admin password."""

    def __init__(self, password: str):
        """
        Args:
            password: Shared admin password; an empty password locks every action
        """
        self._password = password or ""

    def check(self, candidate: str) -> bool:
        if not self._password or not candidate:
            return False
        return hmac.compare_digest(candidate.encode("utf-8"), self._password.encode("utf-8"))

    def require(self, candidate: str, action: str = "this action") -> None:
        """
        Raises:
            PermissionError: If the candidate password is wrong
        """
        if not self.check(candidate):
            logger.warning(f"Rejected admin password for {action}")
            raise PermissionError(f"Incorrect admin password for {action}")
