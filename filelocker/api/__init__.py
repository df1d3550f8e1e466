"""
Filelocker API client layer.

Provides the session-holding HTTP client and the XML/JSON envelope decoders.
"""

from filelocker.api.envelope import (
    JSON,
    XML,
    Envelope,
    EnvelopeDecoder,
    JsonEnvelopeDecoder,
    XmlEnvelopeDecoder,
)
from filelocker.api.http_client import HttpClient, sanitize_for_log

__all__ = [
    "Envelope",
    "EnvelopeDecoder",
    "HttpClient",
    "JSON",
    "JsonEnvelopeDecoder",
    "XML",
    "XmlEnvelopeDecoder",
    "sanitize_for_log",
]
