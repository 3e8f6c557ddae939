from urllib.parse import urlparse

from django.http import Http404, JsonResponse
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .navigation import toggle_section
from .paths import normalize


def _safe_return_url(request) -> str:
    """URL de retorno do mesmo host, vinda de ``next`` ou do referer."""

    for candidate in (request.POST.get("next"), request.META.get("HTTP_REFERER")):
        if candidate and url_has_allowed_host_and_scheme(
            candidate,
            allowed_hosts={request.get_host()},
            require_https=request.is_secure(),
        ):
            parsed = urlparse(candidate)
            path = parsed.path or "/"
            return f"{path}?{parsed.query}" if parsed.query else path
    return "/"


def _wants_json(request) -> bool:
    if request.headers.get("HX-Request") == "true":
        return True
    return "application/json" in request.headers.get("Accept", "")


@require_POST
def toggle_menu_section(request):
    section_id = request.POST.get("section_id", "")
    return_url = _safe_return_url(request)
    is_open = toggle_section(request, section_id, location=normalize(return_url))
    if is_open is None:
        raise Http404("Seção de menu inexistente.")
    if _wants_json(request):
        return JsonResponse({"section_id": section_id, "open": is_open})
    return redirect(return_url)
