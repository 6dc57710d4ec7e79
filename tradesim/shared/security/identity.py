"""
Caller identity resolution.

The API Gateway JWT authorizer verifies the token and passes its claims
in the Lambda event; this module only reads them back. The protected
path set is enforced per path, independent of the request method.
"""

from typing import Optional

from starlette.requests import Request

PROTECTED_PATHS = frozenset(
    {"/portfolio", "/add-cash", "/transactions", "/buy", "/sell"}
)


def get_identity_claim(request: Request) -> Optional[str]:
    """Return the caller's user id, or None when unauthenticated.

    Reads the ``sub`` claim the API Gateway JWT authorizer attaches to
    the Lambda event. When ``identity_header`` is configured, that header
    is used as a fallback for local runs.
    """
    event = request.scope.get("aws.event") or {}
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}
    claims = (authorizer.get("jwt") or {}).get("claims") or {}
    user_id = claims.get("sub")

    header = request.app.state.settings.identity_header
    if not user_id and header:
        user_id = request.headers.get(header)

    return user_id or None


def is_protected_path(request: Request) -> bool:
    """True when the request path, without the API prefix, needs an identity."""
    path = request.url.path
    prefix = request.app.state.settings.api_prefix
    if prefix and path.startswith(prefix):
        path = path[len(prefix):]
    return path in PROTECTED_PATHS
