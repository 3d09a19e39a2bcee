"""
rcs-composer: compose and validate rich messages (text, rich card, carousel,
media) against the channel's structural limits before transmission.
"""

from .application.dtos import parse_envelope, serialize_envelope
from .domain.entities import MessageEnvelope, MessageType
from .domain.validation import Violation, ViolationType, is_sendable, validate_envelope

__version__ = "0.1.0"
__all__ = [
    "MessageEnvelope",
    "MessageType",
    "Violation",
    "ViolationType",
    "is_sendable",
    "parse_envelope",
    "serialize_envelope",
    "validate_envelope",
]
