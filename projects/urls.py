from django.urls import path
from .views import (
    BudgetSummaryView,
    DirectorView,
    MarkNotificationsReadView,
    OptionDetailView,
    OptionListView,
    OptionListsView,
    ProjectDetailView,
    ProjectListView,
    ProjectRecordDetailView,
    ProjectRecordListView,
    TaskNotificationsView,
    UnreadCountView,
    VisitorAcceptView,
)

urlpatterns = [
    path("", ProjectListView.as_view(), name="project-list"),
    path("notifications/", TaskNotificationsView.as_view(), name="task-notifications"),
    path(
        "notifications/unread-count/",
        UnreadCountView.as_view(),
        name="task-notifications-unread",
    ),
    path(
        "notifications/read/",
        MarkNotificationsReadView.as_view(),
        name="task-notifications-read",
    ),
    path("options/", OptionListsView.as_view(), name="option-lists"),
    path("options/<str:kind>/", OptionListView.as_view(), name="option-list"),
    path("options/<str:kind>/<str:value>/", OptionDetailView.as_view(), name="option-detail"),
    path(
        "visitors/<str:token>/accept/",
        VisitorAcceptView.as_view(),
        name="visitor-accept",
    ),
    path("<str:project_id>/", ProjectDetailView.as_view(), name="project-detail"),
    path("<str:project_id>/director/", DirectorView.as_view(), name="project-director"),
    path(
        "<str:project_id>/budget-summary/",
        BudgetSummaryView.as_view(),
        name="project-budget-summary",
    ),
    path(
        "<str:project_id>/<str:domain>/",
        ProjectRecordListView.as_view(),
        name="project-record-list",
    ),
    path(
        "<str:project_id>/<str:domain>/<str:record_id>/",
        ProjectRecordDetailView.as_view(),
        name="project-record-detail",
    ),
]
