from .health import health_bp
from .auth import auth_bp
from .home import home_bp
