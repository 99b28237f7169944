"""
Password reset token delivery.

Email delivery is not part of this service. The default sender records the
issuance in the log; deployments plug in a sender that reaches the user.
"""

import structlog

from ...interfaces.security_interface import IResetTokenSender

logger = structlog.get_logger()


class LoggingResetTokenSender(IResetTokenSender):
    """Logs reset token issuance. The token itself is logged only when include_token is set."""

    def __init__(self, include_token: bool = False):
        self.include_token = include_token

    async def send(self, user_id: str, email: str, token: str) -> None:
        if self.include_token:
            logger.debug("Password reset token issued", user_id=user_id, reset_token=token)
        else:
            logger.info("Password reset token issued", user_id=user_id)
