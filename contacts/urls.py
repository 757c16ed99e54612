from django.urls import path
from .views import ContactByEmailView, ContactDetailView, ContactListView, ContactSearchView

urlpatterns = [
    path("", ContactListView.as_view(), name="contact-list"),
    path("search/", ContactSearchView.as_view(), name="contact-search"),
    path("by-email/<str:email>/", ContactByEmailView.as_view(), name="contact-by-email"),
    path("<str:contact_id>/", ContactDetailView.as_view(), name="contact-detail"),
]
