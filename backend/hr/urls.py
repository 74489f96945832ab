from rest_framework.routers import SimpleRouter
from django.urls import path, include
from .views import EmployeeViewSet, TeamViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'employees', EmployeeViewSet, basename='employee')
router.register(r'teams', TeamViewSet, basename='team')

urlpatterns = [path('', include(router.urls))]
