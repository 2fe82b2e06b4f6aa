from handlers.answer.responder import Responder

__all__ = ["Responder"]
