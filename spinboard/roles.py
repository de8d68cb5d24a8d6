"""
Role claim handling.

The role comes from a header set by the identity provider in front of the
service.  It only decides how much of the statistics a client sees; it is
not an access-control mechanism.
"""

from config import ROLE_HEADER, ADMIN_ROLE


def get_role(headers):
    role = (headers.get(ROLE_HEADER) or '').strip().lower()
    return role or 'user'


def is_detailed_view(headers):
    """True when the injected role claim allows the detailed view."""
    return get_role(headers) == ADMIN_ROLE
