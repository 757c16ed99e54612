from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status
from django.http import Http404

from core.constants import (
    DOMAIN_BUDGETS,
    DOMAIN_COLLABORATORS,
    DOMAIN_CONTACTS,
    DOMAIN_DIRECTORS,
    DOMAIN_DOCUMENTS,
    DOMAIN_PROJECTS,
    DOMAIN_SCRIPTS,
    DOMAIN_TASKS,
    DOMAIN_VISITORS,
)
from core.identity import user_identity
from core.views import WorkspaceMixin, api_error
from .notifications import ReadNotifications, get_task_notifications, unread_count
from .options import KIND_COLLABORATOR_CATEGORIES, OPTION_LISTS, OptionList, options_for
from .serializers import (
    BudgetItemSerializer,
    BudgetSummarySerializer,
    CollaboratorSerializer,
    DirectorSerializer,
    DocumentSerializer,
    MarkReadSerializer,
    OptionSerializer,
    ProjectSerializer,
    ScriptSerializer,
    TaskNotificationSerializer,
    TaskSerializer,
    VisitorSerializer,
)

# URL segment -> (domain name, serializer)
PROJECT_RECORD_DOMAINS = {
    "collaborators": (DOMAIN_COLLABORATORS, CollaboratorSerializer),
    "budgets": (DOMAIN_BUDGETS, BudgetItemSerializer),
    "scripts": (DOMAIN_SCRIPTS, ScriptSerializer),
    "documents": (DOMAIN_DOCUMENTS, DocumentSerializer),
    "visitors": (DOMAIN_VISITORS, VisitorSerializer),
    "tasks": (DOMAIN_TASKS, TaskSerializer),
}


class OptionsMixin:
    def get_options(self, kinds=None):
        return options_for(user_identity(self.request.user), kinds)

    def get_option_list_or_404(self, kind):
        if kind not in OPTION_LISTS:
            raise Http404(f"Unknown option list: {kind}")
        return OptionList(kind, user_identity(self.request.user))


class ProjectListView(OptionsMixin, WorkspaceMixin, APIView):
    """
    GET  /api/projects/
    POST /api/projects/   -> creates the project and its empty collections
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get(self, request):
        projects = self.get_workspace().projects.all()
        return Response(ProjectSerializer(projects, many=True).data)

    def post(self, request):
        serializer = ProjectSerializer(data=request.data, context={"options": self.get_options()})
        serializer.is_valid(raise_exception=True)
        project = self.get_workspace().create_project(serializer.validated_data)
        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailView(OptionsMixin, WorkspaceMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get(self, request, project_id):
        project = self.get_project_or_404(project_id)
        return Response(ProjectSerializer(project).data)

    def patch(self, request, project_id):
        self.get_project_or_404(project_id)
        serializer = ProjectSerializer(
            data=request.data, partial=True, context={"options": self.get_options()}
        )
        serializer.is_valid(raise_exception=True)
        project = self.get_workspace().projects.update(project_id, serializer.validated_data)
        if project is None:
            return api_error("Project not found", status.HTTP_404_NOT_FOUND)
        return Response(ProjectSerializer(project).data)

    def delete(self, request, project_id):
        """
        Deletes the project, then every record keyed by it.
        Domains that could not be purged are reported; their rows stay
        behind as orphans.
        """
        self.get_project_or_404(project_id)
        failed = self.get_workspace().remove_project(project_id)
        return Response({"deleted": project_id, "failed_domains": failed})


class ProjectRecordMixin(OptionsMixin, WorkspaceMixin):
    def get_domain(self, domain):
        try:
            return PROJECT_RECORD_DOMAINS[domain]
        except KeyError:
            raise Http404(f"Unknown collection: {domain}")

    def get_serializer_context(self, name):
        if name == DOMAIN_COLLABORATORS:
            return {"options": self.get_options([KIND_COLLABORATOR_CATEGORIES])}
        return {}


class ProjectRecordListView(ProjectRecordMixin, APIView):
    """
    GET  /api/projects/<project_id>/<collection>/
    POST /api/projects/<project_id>/<collection>/

    Collections: collaborators, budgets, scripts, documents, visitors, tasks.
    New collaborators are also added to (or merged into) the contact registry.
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS, DOMAIN_CONTACTS)

    def get(self, request, project_id, domain):
        name, serializer_class = self.get_domain(domain)
        self.get_project_or_404(project_id)
        records = self.get_workspace()[name].for_project(project_id)
        return Response(serializer_class(records, many=True).data)

    def post(self, request, project_id, domain):
        name, serializer_class = self.get_domain(domain)
        self.get_project_or_404(project_id)
        serializer = serializer_class(data=request.data, context=self.get_serializer_context(name))
        serializer.is_valid(raise_exception=True)

        store = self.get_workspace()[name]
        data = serializer.validated_data
        if name == DOMAIN_VISITORS:
            record = store.invite(
                project_id,
                data["email"],
                name=data.get("name", ""),
                allowed_tabs=data.get("allowed_tabs"),
            )
        else:
            record = store.create({**data, "project_id": project_id})
        if name == DOMAIN_COLLABORATORS:
            self.get_workspace()[DOMAIN_CONTACTS].add_or_merge(data)
        return Response(serializer_class(record).data, status=status.HTTP_201_CREATED)


class ProjectRecordDetailView(ProjectRecordMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get_record_or_404(self, store, project_id, record_id):
        record = store.get(record_id)
        if record is None or record.get("project_id") != project_id:
            raise Http404("Record not found")
        return record

    def get(self, request, project_id, domain, record_id):
        name, serializer_class = self.get_domain(domain)
        store = self.get_workspace()[name]
        record = self.get_record_or_404(store, project_id, record_id)
        return Response(serializer_class(record).data)

    def patch(self, request, project_id, domain, record_id):
        name, serializer_class = self.get_domain(domain)
        store = self.get_workspace()[name]
        self.get_record_or_404(store, project_id, record_id)

        serializer = serializer_class(
            data=request.data, partial=True, context=self.get_serializer_context(name)
        )
        serializer.is_valid(raise_exception=True)
        record = store.update(record_id, serializer.validated_data)
        if record is None:
            return api_error("Record not found", status.HTTP_404_NOT_FOUND)
        return Response(serializer_class(record).data)

    def delete(self, request, project_id, domain, record_id):
        name, _ = self.get_domain(domain)
        store = self.get_workspace()[name]
        self.get_record_or_404(store, project_id, record_id)
        store.remove(record_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class DirectorView(WorkspaceMixin, APIView):
    """
    GET /api/projects/<project_id>/director/
    PUT /api/projects/<project_id>/director/   -> create or replace in place
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get(self, request, project_id):
        self.get_project_or_404(project_id)
        director = self.get_workspace()[DOMAIN_DIRECTORS].director_for(project_id)
        if director is None:
            return api_error("No director set", status.HTTP_404_NOT_FOUND)
        return Response(DirectorSerializer(director).data)

    def put(self, request, project_id):
        self.get_project_or_404(project_id)
        serializer = DirectorSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = {k: v for k, v in serializer.validated_data.items() if k != "id"}
        director = self.get_workspace()[DOMAIN_DIRECTORS].set_director(project_id, data)
        return Response(DirectorSerializer(director).data)


class BudgetSummaryView(WorkspaceMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get(self, request, project_id):
        self.get_project_or_404(project_id)
        totals = self.get_workspace()[DOMAIN_BUDGETS].totals(project_id)
        return Response(BudgetSummarySerializer(totals).data)


class NotificationsMixin(WorkspaceMixin):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def get_read_marks(self):
        return ReadNotifications(user_identity(self.request.user))

    def get_notifications(self, read=None):
        if read is None:
            read = self.get_read_marks().ids()
        return get_task_notifications(self.get_workspace(), read=read)


class TaskNotificationsView(NotificationsMixin, APIView):
    """
    GET /api/projects/notifications/
    One reminder per overdue, due-soon or starting-soon task, flagged read
    or unread.
    """

    def get(self, request):
        notifications = self.get_notifications()
        return Response(TaskNotificationSerializer(notifications, many=True).data)


class UnreadCountView(NotificationsMixin, APIView):
    """GET /api/projects/notifications/unread-count/"""

    def get(self, request):
        return Response({"unread": unread_count(self.get_notifications())})


class MarkNotificationsReadView(NotificationsMixin, APIView):
    """
    POST /api/projects/notifications/read/   { "ids": ["task-<id>", ...] }
    POST /api/projects/notifications/read/   { "all": true }
    """

    def post(self, request):
        serializer = MarkReadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if serializer.validated_data["all"]:
            ids = [n["id"] for n in self.get_notifications()]
        else:
            ids = serializer.validated_data["ids"]
        read = self.get_read_marks().mark(ids)

        return Response({"unread": unread_count(self.get_notifications(read))})


class OptionListsView(OptionsMixin, APIView):
    """
    GET /api/projects/options/
    Every option list of the user, by kind.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            kind: OptionSerializer(options.options(), many=True).data
            for kind, options in self.get_options().items()
        })


class OptionListView(OptionsMixin, APIView):
    """
    GET  /api/projects/options/<kind>/
    POST /api/projects/options/<kind>/   { "value": "web-series", "label": "Web series" }

    Kinds: categories, subcategories, statuses, collaborator-categories.
    """
    permission_classes = [IsAuthenticated]

    def get(self, request, kind):
        options = self.get_option_list_or_404(kind)
        return Response(OptionSerializer(options.options(), many=True).data)

    def post(self, request, kind):
        options = self.get_option_list_or_404(kind)
        serializer = OptionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        options.add(serializer.validated_data["value"], serializer.validated_data["label"])
        return Response(
            OptionSerializer(options.options(), many=True).data,
            status=status.HTTP_201_CREATED,
        )


class OptionDetailView(OptionsMixin, APIView):
    """DELETE /api/projects/options/<kind>/<value>/"""
    permission_classes = [IsAuthenticated]

    def delete(self, request, kind, value):
        options = self.get_option_list_or_404(kind)
        if not options.remove(value):
            return api_error("Option not found", status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


class VisitorAcceptView(WorkspaceMixin, APIView):
    """
    POST /api/projects/visitors/<token>/accept/
    Moves a pending invitation to accepted.
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_PROJECTS,)

    def post(self, request, token):
        visitors = self.get_workspace()[DOMAIN_VISITORS]
        if visitors.find_by_token(token) is None:
            return api_error("Invitation not found", status.HTTP_404_NOT_FOUND)

        ok, message = visitors.accept(token)
        if not ok:
            return api_error(message, status.HTTP_409_CONFLICT)
        return Response(VisitorSerializer(visitors.find_by_token(token)).data)
