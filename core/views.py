from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status

from django.db import connections
from django.db.utils import OperationalError
from django.conf import settings
from django.http import Http404
import time

from .identity import user_identity
from .session import open_workspace


def api_error(message: str, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Small helper to standardize error responses.
    Always returns: {"error": "<message>"} with the given status code.
    """
    return Response({"error": message}, status=status_code)


class WorkspaceMixin:
    """
    Gives an APIView the workspace of the requesting user.

    The workspace is opened lazily, once per request, and loads the domains
    named in ``workspace_domains`` (all of them when unset), running pending
    migrations for the user's identity.
    """
    workspace_domains = None

    def get_workspace_domains(self):
        return self.workspace_domains

    def get_workspace(self):
        workspace = getattr(self, "_workspace", None)
        if workspace is None:
            workspace = open_workspace(user_identity(self.request.user), self.get_workspace_domains())
            self._workspace = workspace
        return workspace

    def get_project_or_404(self, project_id):
        project = self.get_workspace().projects.get(project_id)
        if project is None:
            raise Http404("Project not found")
        return project


class HealthCheckView(APIView):
    """
    Lightweight health endpoint for uptime checks.
    - Checks DB connectivity
    - Returns env, sync backend and simple latency
    """
    permission_classes = [AllowAny]
    authentication_classes = []  # public endpoint

    def get(self, request, *args, **kwargs):
        start = time.time()

        db_ok = True
        try:
            connections["default"].cursor()
        except OperationalError:
            db_ok = False

        duration_ms = int((time.time() - start) * 1000)

        return Response(
            {
                "status": "ok" if db_ok else "degraded",
                "db": db_ok,
                "env": getattr(settings, "ENV", "unknown"),
                "sync_backend": settings.SYNC.get("REMOTE_BACKEND") or "local",
                "latency_ms": duration_ms,
            }
        )
