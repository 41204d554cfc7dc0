"""Secret key and backup code generation."""

import secrets
import string

from jolt.domain.value import BACKUP_CODE_BATCH_SIZE, BACKUP_CODE_LENGTH

from .base import Service

BACKUP_CODE_ALPHABET = string.ascii_uppercase + string.digits
SECRET_KEY_BYTES = 32


class SecretGenerator(Service):
    """Produces unpredictable, user-displayable tokens.

    Draws exclusively from the ``secrets`` CSPRNG and never stores anything.
    """

    def generate_secret_key(self) -> str:
        """Generate an anonymous identity's secret key.

        Returns:
            256-bit key, base64url encoded (43 characters)
        """
        return secrets.token_urlsafe(SECRET_KEY_BYTES)

    def generate_backup_code(self) -> str:
        """Generate one 8-character uppercase alphanumeric code (~41 bits)."""
        return "".join(
            secrets.choice(BACKUP_CODE_ALPHABET) for _ in range(BACKUP_CODE_LENGTH)
        )

    def generate_backup_code_batch(self, n: int = BACKUP_CODE_BATCH_SIZE) -> list[str]:
        """Generate ``n`` distinct backup codes.

        Args:
            n: Batch size

        Returns:
            List of distinct codes
        """
        codes: list[str] = []
        while len(codes) < n:
            code = self.generate_backup_code()
            if code not in codes:
                codes.append(code)
        return codes
