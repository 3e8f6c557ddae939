from django.urls import path

from .api import UserPermissionsViewSet

user_permissions = UserPermissionsViewSet.as_view(
    {
        "get": "retrieve",
        "put": "update",
    }
)

urlpatterns = [
    path("users/<int:pk>/permissions/", user_permissions, name="user-permissions"),
]
