"""Password hashing service using bcrypt.

Provides secure password hashing and verification with configurable
strength validation. The resulting hash is what the ``Password`` value
object holds.
"""

import bcrypt

from roster.domain.user import Password, WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password strength validation.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_LENGTH = 128
    # bcrypt only reads the first 72 bytes and newer releases refuse longer input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
        """
        self._rounds = rounds

    def hash(self, password: str) -> Password:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        A ``Password`` value object holding the bcrypt hash

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return Password.from_hash(hashed.decode("utf-8"))

    def verify(self, password: str, password_hash: Password | str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns
        -------
        True if password matches, False otherwise
        """
        hash_value = (
            password_hash.value if isinstance(password_hash, Password) else password_hash
        )
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                hash_value.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Current requirements:
        - Minimum 8 characters
        - Maximum 128 characters, and at most 72 bytes once UTF-8 encoded

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)

    def needs_rehash(self, password_hash: Password | str) -> bool:
        """Check if a password hash was produced with a different work factor."""
        hash_value = (
            password_hash.value if isinstance(password_hash, Password) else password_hash
        )
        try:
            # bcrypt format: $2b$XX$...
            parts = hash_value.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True
