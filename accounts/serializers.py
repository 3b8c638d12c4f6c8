# =============================================================================
# APP: accounts - Serializers
# =============================================================================

# accounts/serializers.py
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from api.schemas import ResourceSerializer, registry
from .models import User


@registry.register('user')
class UserSerializer(ResourceSerializer):
    """Partie publique du profil utilisateur"""
    user_id = serializers.IntegerField(source='id', read_only=True)
    user_login = serializers.CharField(source='username', read_only=True)
    display_name = serializers.CharField(source='get_display_name', read_only=True)
    date_registered = serializers.DateTimeField(source='date_joined', read_only=True)

    class Meta:
        model = User
        fields = ('id', 'user_id', 'user_login', 'display_name', 'date_registered')
        read_only_fields = fields


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """Serializer JWT avec informations utilisateur"""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        # Ajouter des claims personnalisés
        token['username'] = user.username
        token['display_name'] = user.get_display_name()

        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        data['user'] = UserSerializer(self.user).data
        return data
