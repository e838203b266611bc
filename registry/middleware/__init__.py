"""HTTP middleware. Applied in registry.main; last added = outermost."""

from registry.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
