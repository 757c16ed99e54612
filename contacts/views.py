from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from rest_framework import status

from core.constants import DOMAIN_CONTACTS
from core.views import WorkspaceMixin, api_error
from projects.serializers import ContactFieldsSerializer as ContactSerializer


class ContactListView(WorkspaceMixin, APIView):
    """
    GET  /api/contacts/
    POST /api/contacts/   -> merges into an existing contact with the same
                             email or name (201 when a new one was created)
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CONTACTS,)

    def get(self, request):
        contacts = self.get_workspace()[DOMAIN_CONTACTS].all()
        return Response(ContactSerializer(contacts, many=True).data)

    def post(self, request):
        serializer = ContactSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contact, created = self.get_workspace()[DOMAIN_CONTACTS].add_or_merge(serializer.validated_data)
        return Response(
            ContactSerializer(contact).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class ContactDetailView(WorkspaceMixin, APIView):
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CONTACTS,)

    def patch(self, request, contact_id):
        serializer = ContactSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        contact = self.get_workspace()[DOMAIN_CONTACTS].update(contact_id, serializer.validated_data)
        if contact is None:
            return api_error("Contact not found", status.HTTP_404_NOT_FOUND)
        return Response(ContactSerializer(contact).data)

    def delete(self, request, contact_id):
        contacts = self.get_workspace()[DOMAIN_CONTACTS]
        if contacts.get(contact_id) is None:
            return api_error("Contact not found", status.HTTP_404_NOT_FOUND)
        contacts.remove(contact_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ContactByEmailView(WorkspaceMixin, APIView):
    """
    PATCH /api/contacts/by-email/<email>/
    Updates every contact with that email (case-insensitive).
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CONTACTS,)

    def patch(self, request, email):
        serializer = ContactSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        updated = self.get_workspace()[DOMAIN_CONTACTS].update_by_email(email, serializer.validated_data)
        if not updated:
            return api_error("Contact not found", status.HTTP_404_NOT_FOUND)
        return Response(ContactSerializer(updated, many=True).data)


class ContactSearchView(WorkspaceMixin, APIView):
    """
    GET /api/contacts/search/?q=ann        -> at most 5 name matches
    GET /api/contacts/search/?name=Ann Lee -> exact (case-insensitive) match
    """
    permission_classes = [IsAuthenticated]
    workspace_domains = (DOMAIN_CONTACTS,)

    def get(self, request):
        contacts = self.get_workspace()[DOMAIN_CONTACTS]

        name = request.query_params.get("name")
        if name:
            contact = contacts.find_by_name(name)
            if contact is None:
                return api_error("Contact not found", status.HTTP_404_NOT_FOUND)
            return Response(ContactSerializer(contact).data)

        query = request.query_params.get("q", "")
        return Response(ContactSerializer(contacts.search_by_name(query), many=True).data)
