from typing import Any

import msgspec

__all__ = ("encode_json",)


def _enc_hook(value: Any) -> str:
    return str(value)


_encoder = msgspec.json.Encoder(enc_hook=_enc_hook)


def encode_json(data: Any) -> str:
    """Encode ``data`` as compact JSON, falling back to ``str()`` for unsupported values."""
    return _encoder.encode(data).decode("utf-8")
