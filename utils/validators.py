from flask import request

from utils.errors import ValidationError


def get_json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_body(schema):
    """Validate the JSON body against a pydantic schema (raises on failure)."""
    return schema.model_validate(get_json_body())


def pydantic_details(exc):
    return [
        {"path": ".".join(str(p) for p in err.get("loc", ())), "message": err.get("msg")}
        for err in exc.errors()
    ]
