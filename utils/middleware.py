import uuid
from flask import g, request


def attach_request_id():
    g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())


def get_request_id():
    return getattr(g, "request_id", None)


def add_request_id_header(response):
    request_id = get_request_id()
    if request_id:
        response.headers["X-Request-ID"] = request_id
    return response


def init_middleware(app):
    app.before_request(attach_request_id)
    app.after_request(add_request_id_header)
