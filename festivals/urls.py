from django.urls import path
from .views import FestivalDetailView, FestivalListView, FestivalRolloverView

urlpatterns = [
    path("", FestivalListView.as_view(), name="festival-list"),
    path("rollover/", FestivalRolloverView.as_view(), name="festival-rollover"),
    path("<str:festival_id>/", FestivalDetailView.as_view(), name="festival-detail"),
]
