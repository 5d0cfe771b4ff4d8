"""Master password session for rendering several site passwords."""

import logging

from splurge_master_password.algorithm import MasterPasswordAlgorithm
from splurge_master_password.constants import Constants
from splurge_master_password.exceptions import MasterKeyError
from splurge_master_password.secret_buffer import SecretBuffer
from splurge_master_password.tables import PasswordType

logger = logging.getLogger(__name__)


class MasterPasswordSession:
    """Holds one derived master key so that several sites skip scrypt.

    Keeping the key is the caller's choice; nothing is cached between
    sessions. Close the session (or leave the ``with`` block) to wipe it.
    """

    def __init__(self, user_name: str, master_password: str) -> None:
        """Initialize the session by deriving the master key.

        Args:
            user_name: User's full name
            master_password: Master password

        Raises:
            InputError: If an argument cannot be encoded
            MasterKeyError: If the KDF cannot run
        """
        self._master_key: SecretBuffer | None = MasterPasswordAlgorithm.derive_master_key(
            user_name,
            master_password,
        )

        logger.debug("Master password session opened", extra={
            "event": "session_opened"
        })

    @property
    def is_open(self) -> bool:
        return self._master_key is not None

    def _require_key(self) -> SecretBuffer:
        if self._master_key is None:
            raise MasterKeyError("Master password session is closed")
        return self._master_key

    def template_seed(self, site_name: str, counter: int = Constants.DEFAULT_COUNTER()) -> SecretBuffer:
        """Derive the template seed for a site. The caller owns the result."""
        return MasterPasswordAlgorithm.derive_template_seed(self._require_key(), site_name, counter)

    def password_for(
        self,
        site_name: str,
        counter: int = Constants.DEFAULT_COUNTER(),
        password_type: PasswordType = PasswordType.LONG,
    ) -> str:
        """Generate the password for a site.

        Args:
            site_name: Site identifier
            counter: Rotation counter
            password_type: Password type

        Returns:
            Generated password

        Raises:
            MasterKeyError: If the session is closed
        """
        with self.template_seed(site_name, counter) as seed:
            return MasterPasswordAlgorithm.render_password(seed, password_type)

    def close(self) -> None:
        """Wipe the master key. Safe to call more than once."""
        if self._master_key is not None:
            self._master_key.close()
            self._master_key = None
            logger.debug("Master password session closed", extra={
                "event": "session_closed"
            })

    def __enter__(self) -> "MasterPasswordSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"MasterPasswordSession(open={self.is_open})"
