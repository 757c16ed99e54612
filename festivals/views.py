from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.constants import DOMAIN_FESTIVALS, DOMAIN_PROJECTS
from core.views import WorkspaceMixin, api_error
from .serializers import FestivalSerializer


class FestivalListView(WorkspaceMixin, APIView):
    """
    GET  /api/festivals/
    GET  /api/festivals/?region=europe&year=2026
    GET  /api/festivals/?project=<project_id>   -> festivals in the project's region
    POST /api/festivals/
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_FESTIVALS,)

    def get_workspace_domains(self):
        if self.request.query_params.get("project"):
            return (DOMAIN_FESTIVALS, DOMAIN_PROJECTS)
        return self.workspace_domains

    def get(self, request):
        festivals = self.get_workspace()[DOMAIN_FESTIVALS]

        project_id = request.query_params.get("project")
        if project_id:
            project = self.get_project_or_404(project_id)
            records = festivals.for_project(project)
        else:
            records = festivals.all()

        region = request.query_params.get("region")
        if region:
            records = [f for f in records if f.get("region") == region]

        year = request.query_params.get("year")
        if year:
            try:
                year = int(year)
            except ValueError:
                return api_error("year must be a number")
            records = [f for f in records if f.get("year") == year]

        return Response(FestivalSerializer(records, many=True).data)

    def post(self, request):
        serializer = FestivalSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        festivals = self.get_workspace()[DOMAIN_FESTIVALS]
        if festivals.get(serializer.validated_data["id"]) is not None:
            return api_error("Festival already exists", status.HTTP_409_CONFLICT)
        festival = festivals.create(serializer.validated_data)
        return Response(FestivalSerializer(festival).data, status=status.HTTP_201_CREATED)


class FestivalDetailView(WorkspaceMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_FESTIVALS,)

    def patch(self, request, festival_id):
        serializer = FestivalSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        festival = self.get_workspace()[DOMAIN_FESTIVALS].update(festival_id, serializer.validated_data)
        if festival is None:
            return api_error("Festival not found", status.HTTP_404_NOT_FOUND)
        return Response(FestivalSerializer(festival).data)

    def delete(self, request, festival_id):
        festivals = self.get_workspace()[DOMAIN_FESTIVALS]
        if festivals.get(festival_id) is None:
            return api_error("Festival not found", status.HTTP_404_NOT_FOUND)
        festivals.remove(festival_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class FestivalRolloverView(WorkspaceMixin, APIView):
    """
    POST /api/festivals/rollover/
    Replaces expired festivals with their next editions right away.
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_FESTIVALS,)

    def post(self, request):
        added, dropped = self.get_workspace()[DOMAIN_FESTIVALS].roll_forward()
        return Response({"added": added, "dropped": dropped})
