from .errors import register_error_handlers
from .health import health_bp
from .hello import hello_bp

__all__ = ["health_bp", "hello_bp", "register_error_handlers"]
