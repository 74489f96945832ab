# File: backend/hrms_backend/urls.py
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    # API docs
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),

    # Liveness + auth (no token required)
    path("api/", include("core.urls")),
    path("api/auth/", include("identity.urls")),

    # Tenant-scoped APIs (Bearer token required)
    path("api/", include("hr.urls")),
    path("api/", include("platformapp.urls")),
]
