from .message_dispatcher import MessageDispatcher

__all__ = ["MessageDispatcher"]
