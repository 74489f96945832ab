from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import RegisterSerializer, LoginSerializer


class RegisterView(APIView):
    """
    API endpoint registering an organisation together with its first admin user.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        session = services.register_organisation(
            org_name=data["orgName"],
            admin_name=data["adminName"],
            email=data["email"],
            password=data["password"],
        )
        return Response(session, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        session = services.login(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        return Response(session)


class LogoutView(APIView):
    """
    Tokens are stateless; the client discards its copy.
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    def post(self, request):
        return Response({"message": "Logged out"})
