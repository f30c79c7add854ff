"""Flask Blueprints for the request trace server."""

from blueprints.debug_request import debug_request_bp, init_debug_request_blueprint

__all__ = [
    "debug_request_bp",
    "init_debug_request_blueprint",
]
