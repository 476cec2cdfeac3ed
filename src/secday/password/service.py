"""
Password check service.
"""

import logging
from typing import Optional

from secday.core.config import AppConfig, get_config
from secday.core.errors import PasswordValidationError

from .breach import PwnedPasswordsClient, create_pwned_client
from .calculator import PasswordScoreCalculator
from .models import PasswordCheck

logger = logging.getLogger(__name__)


class PasswordCheckService:
    """
    Runs one password check end to end.

    Each check:
    1. Rejects empty input before touching the network
    2. Queries Pwned Passwords by hash prefix
    3. Scores the password with the calculator
    """

    def __init__(
        self,
        client: PwnedPasswordsClient,
        calculator: Optional[PasswordScoreCalculator] = None,
    ):
        """
        Initialize password check service.

        Args:
            client: Breach lookup client
            calculator: Score calculator (weighted mode by default)
        """
        self.client = client
        self.calculator = calculator or PasswordScoreCalculator()

    @staticmethod
    def validate(password: Optional[str]) -> str:
        """
        Reject missing or empty passwords.

        Raises:
            PasswordValidationError: If there is nothing to check
        """
        if not password:
            raise PasswordValidationError("비밀번호를 입력해주세요")
        return password

    async def check(self, password: Optional[str]) -> PasswordCheck:
        """
        Check a password's strength and breach exposure.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            PasswordCheck with the score breakdown

        Raises:
            PasswordValidationError: If the password is empty
            BreachLookupError: If the breach lookup fails
        """
        password = self.validate(password)

        logger.debug("Looking up breach exposure...")
        breach = await self.client.lookup(password)

        logger.debug("Calculating password score...")
        return self.calculator.compute(password, breach.occurrences)

    async def close(self) -> None:
        """Release the breach client."""
        await self.client.close()


def create_password_service(config: Optional[AppConfig] = None) -> PasswordCheckService:
    """
    Build a PasswordCheckService from configuration.

    Args:
        config: Application config (global config if omitted)

    Returns:
        Configured PasswordCheckService
    """
    config = config or get_config()

    client = create_pwned_client(
        api_url=config.pwned.api_url,
        timeout=config.pwned.timeout,
        user_agent=config.pwned.user_agent,
        add_padding=config.pwned.add_padding,
    )
    calculator = PasswordScoreCalculator(mode=config.scoring.mode)

    return PasswordCheckService(client=client, calculator=calculator)
