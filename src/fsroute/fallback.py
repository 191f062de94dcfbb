"""Default responder for methods a route file does not handle."""

from fsroute.http.request import Request
from fsroute.http.response import Response


def method_not_supported(request: Request) -> Response:
    """405 with a JSON string naming the rejected method.

    Body: ``"Method PATCH not supported"``.
    """
    return Response.json(f"Method {request.method} not supported", status=405)
