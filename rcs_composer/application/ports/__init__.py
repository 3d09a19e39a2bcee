from .inbound import CheckMediaUseCase, SubmitMessageUseCase, ValidateMessageUseCase
from .outbound import MessageDispatcher

__all__ = [
    "CheckMediaUseCase",
    "MessageDispatcher",
    "SubmitMessageUseCase",
    "ValidateMessageUseCase",
]
