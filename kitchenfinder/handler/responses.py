"""
Response envelope for the closest kitchen handler
Bodies are either a Message or a Payload; build_response encodes both
"""

import json
from typing import Any, Dict, Union

from pydantic import BaseModel, Field

JSON_HEADERS = {"Content-Type": "application/json"}


class Message(BaseModel):
    """Plain text outcome, encoded as {"message": ...}"""

    message: str = Field(description="Human readable message")


class Payload(BaseModel):
    """Structured outcome, encoded verbatim"""

    data: Any = Field(description="JSON-serializable value or pydantic model")


ResponseBody = Union[Message, Payload]


def encode_body(body: ResponseBody) -> str:
    """Serialize a response body to a JSON string"""
    if isinstance(body, Message):
        return json.dumps(body.model_dump())

    data = body.data
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    return json.dumps(data)


def build_response(status_code: int, body: Union[ResponseBody, str]) -> Dict[str, Any]:
    """
    Build a Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response body; bare strings are treated as a Message

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    if isinstance(body, str):
        body = Message(message=body)

    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": encode_body(body),
    }
