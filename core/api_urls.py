from rest_framework.routers import DefaultRouter

from .api import NavigationViewSet

router = DefaultRouter()
router.register(r"navigation", NavigationViewSet, basename="navigation")

urlpatterns = router.urls
