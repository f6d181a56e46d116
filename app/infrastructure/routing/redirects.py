"""HTTP navigation host.

Within one request, a "replace" becomes a 307 redirect (the browser does
not keep the corrected URL in history and the method is preserved) and a
"push" becomes a 303 See Other answering a user action. The next request
re-enters the guard with the new location.
"""

from typing import Optional, Union

from starlette.requests import Request
from starlette.responses import RedirectResponse

from infrastructure.i18n import raw_request_path
from infrastructure.routing.navigation import Navigator
from infrastructure.routing.paths import RoutePath

REPLACE_STATUS_CODE = 307
PUSH_STATUS_CODE = 303


def request_route_path(request: Request) -> RoutePath:
    """Location of an HTTP request with its percent-encoding intact."""
    return RoutePath.from_parts(raw_request_path(request), request.url.query)


class RedirectNavigator(Navigator):
    """Request-scoped host that turns navigation requests into redirects.

    Attributes:
        response: The redirect to send, once a navigation was requested.
    """

    def __init__(self, location: Union[RoutePath, str]):
        self._location = RoutePath.coerce(location)
        self.response: Optional[RedirectResponse] = None

    @property
    def location(self) -> RoutePath:
        return self._location

    def push(self, path: Union[RoutePath, str]) -> None:
        self._redirect(path, PUSH_STATUS_CODE)

    def replace(self, path: Union[RoutePath, str]) -> None:
        self._redirect(path, REPLACE_STATUS_CODE)

    def _redirect(self, path: Union[RoutePath, str], status_code: int) -> None:
        self._location = RoutePath.coerce(path)
        self.response = RedirectResponse(str(self._location), status_code=status_code)
