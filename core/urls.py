from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("menu/toggle/", views.toggle_menu_section, name="menu_toggle"),
]
