# api/routers.py
from rest_framework.routers import SimpleRouter


class OptionalSlashRouter(SimpleRouter):
    """Routes accessibles avec ou sans slash final (/projects et /projects/)"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.trailing_slash = '/?'
