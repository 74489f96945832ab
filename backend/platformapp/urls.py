from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import LogEntryViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'logs', LogEntryViewSet, basename='log')

urlpatterns = [
    path('', include(router.urls)),
]
