"""
Request ID tracking for request tracing.

Reuses an incoming X-Request-ID header or generates one, exposes it as
g.request_id and echoes it on the response.
"""
import uuid
from flask import Flask, g, request

REQUEST_ID_HEADER = 'X-Request-ID'


def init_request_id_tracking(app: Flask) -> None:
    @app.before_request
    def assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @app.after_request
    def echo_request_id(response):
        request_id = getattr(g, 'request_id', None)
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response
