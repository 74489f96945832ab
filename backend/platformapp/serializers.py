from rest_framework import serializers
from .models import Organisation, LogEntry

class OrganisationSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Organisation
        fields = ("id", "name")

class LogEntrySerializer(serializers.ModelSerializer):
    organisation_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = LogEntry
        fields = ("id", "organisation_id", "user_id", "action", "meta", "timestamp")
        read_only_fields = fields
