import logging

import pytest
from django.test import override_settings
from rest_framework.test import APIClient

from core.menu import MenuLeaf, MenuLink, MenuSection

# Configurar logging para depuração
logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function", autouse=True)
def enable_db_access_for_all_tests(db):
    """Habilita o acesso ao banco de dados para todos os testes."""
    pass


@pytest.fixture
def admin_user(django_user_model):
    """Cria um superusuário com acesso a todas as rotas."""
    return django_user_model.objects.create_superuser(
        email="admin@example.com",
        username="admin",
        password="password",
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def collapsible_menu():
    """Troca o menu configurado por um com seções recolhíveis."""
    with override_settings(NAVIGATION_MENU="tests.menus.COLLAPSIBLE_MENU"):
        yield


@pytest.fixture
def sample_menu():
    """Menu com link avulso, seção recolhível, seção fixa e seção vazia."""
    return (
        MenuLink(href="/", label="Dashboard"),
        MenuSection(
            id="operations",
            title="Operations",
            collapsible=True,
            items=(
                MenuLeaf(href="/vehicle-status", label="Vehicle Status"),
                MenuLeaf(href="/lot-manager", label="Lot manager"),
                MenuLeaf(href="/reservations", label="Reservations"),
            ),
        ),
        MenuSection(
            id="admin",
            title="Admin",
            collapsible=False,
            items=(
                MenuLeaf(href="/users", label="Users"),
                MenuLeaf(href="/users/[user]", label="User editor"),
            ),
        ),
        MenuSection(id="empty", title="Em breve", items=None),
    )
