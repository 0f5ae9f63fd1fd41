"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests into payloads
- Call services for business logic
- Leave domain errors to common.exception_handler
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.domain import LoginPayload, SignupPayload
from accounts.handlers.serializers import AccountSerializer
from accounts.providers import get_account_service


class SignupView(APIView):
    """Handler for POST /users/signup"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        result = get_account_service().signup(SignupPayload.from_data(request.data))
        return Response(
            {
                "success": True,
                "message": "User registered successfully",
                "user": AccountSerializer(result.account).data,
                "token": result.token,
            },
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    """Handler for POST /users/login"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        result = get_account_service().login(LoginPayload.from_data(request.data))
        return Response(
            {
                "success": True,
                "message": "Login successful",
                "user": AccountSerializer(result.account).data,
                "token": result.token,
            },
            status=status.HTTP_200_OK,
        )
