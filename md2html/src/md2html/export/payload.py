import base64


def encode_payload(data: bytes) -> str:
    """Standard base64, safe inside a double-quoted script string."""
    return base64.b64encode(data).decode("ascii")


def decode_payload(payload: str) -> bytes:
    return base64.b64decode(payload.encode("ascii"), validate=True)
