"""Password hashing service using bcrypt.

Hashes are kept as raw bytes end to end; the store persists them as an
opaque binary column and never sees the plaintext.
"""

import bcrypt

from warden_auth.exceptions import HashingError, InvalidInputError


class PasswordHashingService:
    """Service for one-way password hashing and verification.

    Uses bcrypt, which salts every hash and carries its own work factor.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> password_hash = service.hash("pw123")
    >>> service.verify("pw123", password_hash)
    True
    >>> service.verify("wrong", password_hash)
    False
    """

    DEFAULT_ROUNDS = 12
    # bcrypt only looks at the first 72 bytes of input
    MAX_PASSWORD_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            a conservative balance of security and performance.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> bytes:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash (salt and cost embedded)

        Raises
        ------
        InvalidInputError
            If the password is empty or longer than bcrypt accepts
        HashingError
            If bcrypt fails to produce a hash
        """
        encoded = self._encode(password)
        try:
            salt = bcrypt.gensalt(rounds=self._rounds)
            return bcrypt.hashpw(encoded, salt)
        except (ValueError, TypeError) as e:
            raise HashingError(f"Failed to hash password: {e}") from e

    def verify(self, password: str, password_hash: bytes) -> bool:
        """Verify a password against a hash in constant time.

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        HashingError
            If ``password_hash`` is not a valid bcrypt hash
        """
        if not password:
            return False
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash)
        except (ValueError, TypeError) as e:
            raise HashingError(f"Malformed password hash: {e}") from e

    def _encode(self, password: str) -> bytes:
        if not password:
            msg = "Password cannot be empty"
            raise InvalidInputError(msg)

        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_PASSWORD_BYTES:
            msg = f"Password cannot exceed {self.MAX_PASSWORD_BYTES} bytes"
            raise InvalidInputError(msg)
        return encoded
