from .message_use_cases import CheckMediaUseCase, SubmitMessageUseCase, ValidateMessageUseCase

__all__ = [
    "CheckMediaUseCase",
    "SubmitMessageUseCase",
    "ValidateMessageUseCase",
]
