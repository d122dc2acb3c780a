"""Password hashing service using bcrypt.

Provides salted password hashing and constant-time verification. The
async variants push the CPU-bound bcrypt work onto a worker thread so the
event loop keeps serving other requests.
"""

import asyncio
import logging

import bcrypt

from devconnect_auth.exceptions import PasswordHashingError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor. Every call to ``hash``
    generates a fresh salt, so hashing the same password twice yields two
    different hashes that both verify.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 10

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 10,
            which keeps a verification in the tens of milliseconds.

        Raises
        ------
        PasswordHashingError
            If bcrypt rejects the work factor
        """
        self._rounds = rounds
        # verify_dummy only ever runs checkpw against this
        self._dummy_hash = self.hash("devconnect-dummy-password").encode("utf-8")

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        PasswordHashingError
            If bcrypt rejects the input
        """
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            hashed = bcrypt.hashpw(self._encode(password), salt)
        except (ValueError, TypeError) as e:
            raise PasswordHashingError from e
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        A corrupt or non-bcrypt hash never raises; it simply fails to match.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                self._encode(password),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            logger.warning("Stored password hash is malformed")
            return False

    def verify_dummy(self, password: str) -> bool:
        """Burn the same amount of work as ``verify`` and return False.

        Used when there is no stored hash to check against, so the caller's
        response time does not reveal whether the account exists.
        """
        bcrypt.checkpw(self._encode(password), self._dummy_hash)
        return False

    async def hash_async(self, password: str) -> str:
        """Hash a password on a worker thread."""
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, password_hash: str) -> bool:
        """Verify a password on a worker thread."""
        return await asyncio.to_thread(self.verify, password, password_hash)

    async def verify_dummy_async(self, password: str) -> bool:
        """Run ``verify_dummy`` on a worker thread."""
        return await asyncio.to_thread(self.verify_dummy, password)

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_BYTES]
