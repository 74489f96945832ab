import logging
import uuid

logger = logging.getLogger(__name__)


class RequestIDMiddleware:
    """
    Adds/propagates a request id for tracing. Accessible in logs and responses.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        rid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        request.request_id = rid
        response = self.get_response(request)
        response["X-Request-ID"] = rid
        if response.status_code >= 500:
            logger.error("%s %s -> %s [request_id=%s]", request.method, request.path, response.status_code, rid)
        return response
