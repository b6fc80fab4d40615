
from . import convert, intake

routers = [
    intake.router,
    convert.router,
]

__all__ = [
    "routers",
]
