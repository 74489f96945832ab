from rest_framework import serializers

from common.models import MAX_ID
from . import selectors
from .models import Employee, Team


def _required(message):
    return {"required": message, "blank": message, "null": message}


class EmployeeSerializer(serializers.ModelSerializer):
    first_name = serializers.CharField(max_length=100, error_messages=_required("First and last name required"))
    last_name = serializers.CharField(max_length=100, error_messages=_required("First and last name required"))

    class Meta:
        model = Employee
        fields = ("id", "first_name", "last_name", "email", "phone", "created_at")
        read_only_fields = ("id", "created_at")

    def validate_email(self, value):
        return value or None

    def validate_phone(self, value):
        return value or None

    def update(self, instance, validated_data):
        # PUT replaces the record: omitted optional fields are cleared
        for field in ("email", "phone"):
            validated_data.setdefault(field, None)
        return super().update(instance, validated_data)


class TeamSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=120, error_messages=_required("Team name required"))

    class Meta:
        model = Team
        fields = ("id", "name", "description", "created_at")
        read_only_fields = ("id", "created_at")

    def update(self, instance, validated_data):
        validated_data.setdefault("description", None)
        return super().update(instance, validated_data)


class TeamListSerializer(TeamSerializer):
    employee_count = serializers.IntegerField(read_only=True)

    class Meta(TeamSerializer.Meta):
        fields = TeamSerializer.Meta.fields + ("employee_count",)


class TeamMemberSerializer(serializers.ModelSerializer):
    class Meta:
        model = Employee
        fields = ("id", "first_name", "last_name", "email")
        read_only_fields = fields


class TeamDetailSerializer(TeamSerializer):
    employees = serializers.SerializerMethodField()

    class Meta(TeamSerializer.Meta):
        fields = TeamSerializer.Meta.fields + ("employees",)

    def get_employees(self, obj):
        return TeamMemberSerializer(selectors.team_members(obj.organisation_id, obj.id), many=True).data


class AssignEmployeesSerializer(serializers.Serializer):
    """Accepts {"employeeId": 1} or {"employeeIds": [1, 2, 3]}."""
    employeeId = serializers.IntegerField(required=False, allow_null=True, min_value=1, max_value=MAX_ID)
    employeeIds = serializers.ListField(child=serializers.IntegerField(min_value=1, max_value=MAX_ID), required=False, allow_empty=True)

    def validate(self, attrs):
        if attrs.get("employeeId"):
            ids = [attrs["employeeId"]]
        else:
            ids = list(attrs.get("employeeIds") or [])
        if not ids:
            raise serializers.ValidationError("Employee ID(s) required")
        attrs["employee_ids"] = list(dict.fromkeys(ids))
        return attrs
