from flask import request

from ..errors import ValidationError


def parse_body(schema):
    """Validate the JSON request body against a pydantic schema."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return schema.model_validate(payload)


def parse_args(schema):
    return schema.model_validate(request.args.to_dict())
