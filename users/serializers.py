from rest_framework import serializers

from core.identity import user_identity
from .models import User


class UserSerializer(serializers.ModelSerializer):
    # Owner id of every record the user syncs
    identity = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            'id',
            'username',
            'email',
            'name',
            'role',
            'identity',
            'date_joined',
        ]
        read_only_fields = ['id', 'username', 'role', 'date_joined']

    def get_identity(self, obj):
        return user_identity(obj)
