import time

from django.utils.deprecation import MiddlewareMixin

from .metrics import ENDPOINT_LATENCY
from .paths import normalize


class CurrentLocationMiddleware:
    """Publica ``request.current_location`` normalizado a cada navegação."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.current_location = normalize(request.get_full_path())
        return self.get_response(request)


class EndpointMetricsMiddleware(MiddlewareMixin):
    def __call__(self, request):
        start = time.monotonic()
        response = self.get_response(request)
        duration = time.monotonic() - start
        resolver = getattr(request, "resolver_match", None)
        endpoint = resolver.view_name if resolver else normalize(request.path)
        ENDPOINT_LATENCY.labels(request.method, endpoint).observe(duration)
        return response
