from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.response import Response

from common.mixins import TenantScopedReadOnlyViewSet
from .filters import LogEntryFilter
from .models import LogEntry
from .serializers import LogEntrySerializer

# Fixed page: the newest entries only, no cursor
LOG_PAGE_SIZE = 100


class LogEntryViewSet(TenantScopedReadOnlyViewSet):
    queryset = LogEntry.objects.all()
    serializer_class = LogEntrySerializer
    filter_backends = [DjangoFilterBackend]
    filterset_class = LogEntryFilter
    default_ordering = ("-timestamp", "-id")
    pagination_class = None

    def list(self, request, *args, **kwargs):
        qs = self.filter_queryset(self.get_queryset())[:LOG_PAGE_SIZE]
        return Response(self.get_serializer(qs, many=True).data)
