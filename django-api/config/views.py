from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView


class IndexView(APIView):
    """Handler for GET /"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response(
            {
                "message": "REST API is running",
                "endpoints": {
                    "signup": "POST /users/signup",
                    "login": "POST /users/login",
                    "events": "GET /events",
                    "event": "GET /events/{id}",
                },
            }
        )
