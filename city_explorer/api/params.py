"""
Reading the `data` query parameter.

Clients send the location either as JSON (data={"id":1,...}) or in bracket
notation (data[id]=1&data[latitude]=47.6), the latter being what jQuery-style
clients produce for a nested object.
"""
import json
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from city_explorer.core.errors import InvalidQueryError

T = TypeVar("T", bound=BaseModel)


def data_text(request: Request) -> str:
    value = (request.query_params.get("data") or "").strip()
    if not value:
        raise InvalidQueryError("missing data parameter")
    return value


def data_object(request: Request, model: type[T]) -> T:
    params = request.query_params
    raw: dict = {}
    if "data" in params:
        try:
            loaded = json.loads(params["data"])
        except ValueError:
            raise InvalidQueryError("data must be a JSON object") from None
        if not isinstance(loaded, dict):
            raise InvalidQueryError("data must be a JSON object")
        raw = loaded
    else:
        for key, value in params.items():
            if key.startswith("data[") and key.endswith("]"):
                raw[key[len("data["):-1]] = value
    if not raw:
        raise InvalidQueryError("missing data parameter")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "data" for err in e.errors())
        raise InvalidQueryError(f"invalid data parameter: {fields}") from None
