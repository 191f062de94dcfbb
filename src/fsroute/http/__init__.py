"""Immutable request and response values exchanged with route handlers."""

from fsroute.http.request import Request
from fsroute.http.response import Response

__all__ = ["Request", "Response"]
