from .build_app import build_backlogs_app

__all__ = [
    "build_backlogs_app",
]
