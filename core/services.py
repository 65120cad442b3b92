"""
Base service classes.
Services own the business rules and reach the database through repositories.
"""
import logging


class BaseService:
    """
    Base for inventory, allocation and projection services.
    Log lines carry the ids involved as ``key=value`` pairs, e.g.
    ``Tenant removed | tenant_id=4 room_id=12``.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    @staticmethod
    def _with_context(message: str, context: dict) -> str:
        if not context:
            return message
        pairs = ' '.join(f"{key}={value}" for key, value in context.items())
        return f"{message} | {pairs}"

    def log_info(self, message: str, **context):
        self.logger.info(self._with_context(message, context))

    def log_warning(self, message: str, **context):
        self.logger.warning(self._with_context(message, context))
