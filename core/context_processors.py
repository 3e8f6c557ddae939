def menu_items(request):
    from .navigation import build_menu

    return {"NAV_MENU": build_menu(request)}
