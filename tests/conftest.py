import pytest
from rest_framework.test import APIClient

from .factories import UserFactory

API = '/api/v1'


@pytest.fixture(autouse=True)
def import_dir(settings, tmp_path):
    """Fichiers d'import temporaires isolés par test"""
    path = tmp_path / 'imports'
    settings.GP_REST = {**settings.GP_REST, 'IMPORT_DIR': str(path)}
    return path


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return UserFactory()


@pytest.fixture
def superuser(db):
    return UserFactory(username='administrateur', is_superuser=True, is_staff=True)


@pytest.fixture
def user_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def superuser_client(superuser):
    client = APIClient()
    client.force_authenticate(user=superuser)
    return client


@pytest.fixture
def client_for():
    """Client authentifié pour un utilisateur quelconque"""
    def make(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return make
