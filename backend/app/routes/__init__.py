# Routes module
from .health import router as health_router
