from django.contrib.auth import get_user_model
from rest_framework import serializers

User = get_user_model()


def _required(message):
    return {"required": message, "blank": message, "null": message}


class RegisterSerializer(serializers.Serializer):
    orgName = serializers.CharField(max_length=200, error_messages=_required("All fields required"))
    adminName = serializers.CharField(max_length=150, error_messages=_required("All fields required"))
    email = serializers.EmailField(error_messages=_required("All fields required"))
    password = serializers.CharField(write_only=True, trim_whitespace=False,
                                     error_messages=_required("All fields required"))


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages=_required("Email and password required"))
    password = serializers.CharField(write_only=True, trim_whitespace=False,
                                     error_messages=_required("Email and password required"))


class UserSummarySerializer(serializers.ModelSerializer):
    """
    Public view of a user. Never exposes the password hash.
    """
    class Meta:
        model = User
        fields = ("id", "name", "email")
        read_only_fields = fields
