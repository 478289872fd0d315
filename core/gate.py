"""
Per-request decision: let the request through or answer it with the
placeholder page.

The checks run in a fixed order. Nothing is rendered until every bypass has
been ruled out.
"""
import dataclasses

from .classify import is_internal_request
from .rendering import render_placeholder


class Pass:
    intercepted = False

    def __repr__(self):
        return "PASS"


PASS = Pass()


@dataclasses.dataclass(frozen=True)
class Intercept:
    response: object
    intercepted = True


def decide(request, settings, identity, is_internal=is_internal_request):
    if not settings.enabled:
        return PASS
    if is_internal(request):
        return PASS
    if identity.has_elevated_capability:
        return PASS
    return Intercept(render_placeholder(settings))
