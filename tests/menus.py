from core.menu import MenuLeaf, MenuLink, MenuSection

COLLAPSIBLE_MENU = (
    MenuLink(href="/", label="Dashboard"),
    MenuSection(
        id="operations",
        title="Operations",
        items=(
            MenuLeaf(href="/vehicle-status", label="Vehicle Status"),
            MenuLeaf(href="/lot-manager", label="Lot manager"),
            MenuLeaf(href="/reservations", label="Reservations"),
        ),
    ),
    MenuSection(
        id="admin",
        title="Admin",
        items=(
            MenuLeaf(href="/users", label="Users"),
            MenuLeaf(href="/users/[user]", label="User editor"),
        ),
    ),
    MenuSection(
        id="settings",
        title="Settings",
        collapsible=False,
        items=(MenuLeaf("/settings", "Settings"),),
    ),
)
