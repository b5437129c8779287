from .cipher import router as cipher_router

_routers = [cipher_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
