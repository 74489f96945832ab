import django_filters

from .models import LogEntry


class LogEntryFilter(django_filters.FilterSet):
    """
    Supports query params (all optional, combined with AND):
      - action     exact action tag, e.g. employee_created
      - startDate  inclusive lower bound on timestamp (ISO date or datetime)
      - endDate    inclusive upper bound on timestamp (ISO date or datetime)
    """
    action = django_filters.CharFilter(field_name="action", lookup_expr="exact")
    startDate = django_filters.DateTimeFilter(field_name="timestamp", lookup_expr="gte")
    endDate = django_filters.DateTimeFilter(field_name="timestamp", lookup_expr="lte")

    class Meta:
        model = LogEntry
        fields = ["action", "startDate", "endDate"]
