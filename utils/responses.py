from flask import jsonify


def ok(data=None, code=200):
    return jsonify(data), code


def fail(message="Bad Request", code=400, details=None, **extra):
    payload = {"error": message}
    if details is not None:
        payload["details"] = details
    payload.update(extra)
    return jsonify(payload), code


def serialize_all(rows):
    return [r.to_dict() for r in rows]
