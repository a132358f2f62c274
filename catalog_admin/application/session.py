"""Session capability.

The catalog admin screen is only available to a signed-in user. Hosts
check the session with ``require_session`` before building a controller
and redirect when it fails.
"""

from dataclasses import dataclass

from catalog_admin.domain.exceptions import SessionRequiredError


@dataclass(frozen=True)
class Session:
    """Authenticated user session.

    Attributes:
        user_id: Identifier of the signed-in user.
        token: Optional bearer token forwarded to the product store.
    """

    user_id: str
    token: str | None = None


def require_session(session: Session | None, redirect_to: str = "/") -> Session:
    """Return the session or fail with the redirect target.

    Args:
        session: Current session, if any.
        redirect_to: Location for unauthenticated users.

    Raises:
        SessionRequiredError: If there is no signed-in user.
    """
    if session is None or not session.user_id:
        raise SessionRequiredError(redirect_to=redirect_to)
    return session
