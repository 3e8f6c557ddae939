import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import PermissionDenied
from django.http import HttpResponse
from django.test import RequestFactory
from django.views import View

from accounts.factories import UserFactory
from core.metrics import PERMISSION_ENTRIES_DROPPED
from core.permissions import (
    EMPTY_PERMISSION_SET,
    HasRoutePermission,
    PermissionSet,
    RoutePermissionRequiredMixin,
    build_permission_set,
    can_access,
    permission_set_for_user,
)


def test_build_permission_set_normalizes_and_deduplicates():
    permission_set = build_permission_set(["/users/", "/users", "/users?x=1", "/reservations#top"])

    assert permission_set.patterns == frozenset({"/users", "/reservations"})
    assert permission_set.allow_all is False


@pytest.mark.parametrize("raw", [None, "/users", {"permissions": ["*"]}, 42, b"*"])
def test_malformed_permission_lists_are_empty(raw):
    assert build_permission_set(raw) == EMPTY_PERMISSION_SET


def test_only_lists_tuples_and_sets_are_accepted():
    assert build_permission_set(entry for entry in ["*"]) == EMPTY_PERMISSION_SET
    assert build_permission_set(("/users",)).patterns == frozenset({"/users"})
    assert build_permission_set(frozenset({"/*"})).allow_all is True


def test_non_string_entries_are_dropped():
    before = PERMISSION_ENTRIES_DROPPED._value.get()

    permission_set = build_permission_set(["/users", None, 3, ["/x"], {"a": 1}])

    assert permission_set.patterns == frozenset({"/users"})
    assert PERMISSION_ENTRIES_DROPPED._value.get() == before + 4


@pytest.mark.parametrize("wildcard", ["*", "/*", "/*/", "*?x"])
@pytest.mark.parametrize("href", ["", "/", "/reservations", "/a/b/c/d/e/f"])
def test_allow_all_grants_every_href(wildcard, href):
    permission_set = build_permission_set(["/reservations", wildcard])

    assert permission_set.allow_all is True
    assert can_access(permission_set, href) is True


@pytest.mark.parametrize("href", ["/users", "/reservations", "/a/b", "users"])
def test_empty_permissions_deny_everything(href):
    permission_set = build_permission_set([])

    assert permission_set.allow_all is False
    assert can_access(permission_set, href) is False


def test_allow_all_flag_wins_over_patterns():
    permission_set = PermissionSet(patterns=frozenset(), allow_all=True)

    assert permission_set.can_access("/anything") is True


def test_can_access_is_existential():
    permission_set = build_permission_set(["/users/:id", "/reservations/*"])

    assert can_access(permission_set, "/users/42") is True
    assert can_access(permission_set, "/reservations/2024/10") is True
    assert can_access(permission_set, "/users") is False
    assert can_access(permission_set, "/lot-manager") is False


def test_permission_set_for_anonymous_user_is_default_deny():
    assert permission_set_for_user(AnonymousUser()) == EMPTY_PERMISSION_SET
    assert permission_set_for_user(None) == EMPTY_PERMISSION_SET


def test_permission_set_for_inactive_user_is_default_deny():
    user = UserFactory(permissions=["*"], is_active=False)

    assert permission_set_for_user(user) == EMPTY_PERMISSION_SET


def test_permission_set_for_user_with_malformed_record():
    user = UserFactory(permissions={"not": "a list"})

    assert permission_set_for_user(user) == EMPTY_PERMISSION_SET


def test_permission_set_for_user_reads_record():
    user = UserFactory(permissions=["/reservations", "/users/*"])

    permission_set = permission_set_for_user(user)

    assert permission_set.patterns == frozenset({"/reservations", "/users/*"})


class _ReservationsView(RoutePermissionRequiredMixin, View):
    def get(self, request, *args, **kwargs):
        return HttpResponse("ok")


def test_route_permission_mixin_allows_granted_path():
    request = RequestFactory().get("/reservations/12")
    request.user = UserFactory(permissions=["/reservations/*"])

    response = _ReservationsView.as_view()(request)

    assert response.status_code == 200


def test_route_permission_mixin_denies_other_paths():
    request = RequestFactory().get("/users/1")
    request.user = UserFactory(permissions=["/reservations/*"])

    with pytest.raises(PermissionDenied):
        _ReservationsView.as_view()(request)


class _FakeView:
    def __init__(self, route=None):
        if route is not None:
            self.get_required_route = lambda: route


def test_has_route_permission_uses_view_route():
    request = RequestFactory().get("/api/whatever/")
    request.user = UserFactory(permissions=["/users/:id"])

    assert HasRoutePermission().has_permission(request, _FakeView("/users/7")) is True
    assert HasRoutePermission().has_permission(request, _FakeView("/users")) is False


def test_has_route_permission_defaults_to_request_path():
    request = RequestFactory().get("/reservations")
    request.user = UserFactory(permissions=["/reservations"])

    assert HasRoutePermission().has_permission(request, _FakeView()) is True
