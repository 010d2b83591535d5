"""Stand-ins for platform types the examples talk to.

They expose only what the examples call and return canned values. No
real UI, device or permission system is touched.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class TextView:
    """Editable text with a color and a selection, like a UI text view.

    Assigning ``text`` moves the caret to the end of the new text.
    """

    def __init__(self) -> None:
        self._text = ""
        self.text_color: str | None = None
        self.selected_range: tuple[int, int] = (0, 0)  # (location, length)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.selected_range = (len(value), 0)


class AuthorizationStatus(str, Enum):
    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"


class CannedAuthorization:
    """Permission service that answers from fixed values.

    ``status`` is what the service reports before any request;
    ``grants`` decides the answer to ``request_access``.
    """

    def __init__(
        self,
        status: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED,
        grants: bool = True,
    ) -> None:
        self._status = status
        self._grants = grants
        self.requests = 0

    def authorization_status(self) -> AuthorizationStatus:
        return self._status

    def request_access(self, completion: Callable[[bool], None]) -> None:
        self.requests += 1
        self._status = (
            AuthorizationStatus.AUTHORIZED if self._grants else AuthorizationStatus.DENIED
        )
        completion(self._grants)
