"""Zero-on-close container for secret bytes."""

from typing import Any, Iterator, Optional, Union

from splurge_master_password.crypto_utils import CryptoUtils
from splurge_master_password.exceptions import InputError


class SecretBuffer:
    """Owns a mutable copy of secret bytes and wipes it when closed.

    Used for the UTF-8 master password, the master key and the template
    seed. The value is never shown by ``repr``/``str`` and the buffer
    refuses to be copied or pickled, so the only copy lives here until
    ``close()`` zeroes it.
    """

    __slots__ = ("_data", "_closed")

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        if isinstance(data, str) or not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("SecretBuffer requires a bytes-like value")
        self._data = bytearray(data)
        self._closed = False

    @classmethod
    def from_text(cls, text: str, *, field: str = "Text") -> "SecretBuffer":
        """Create a buffer holding the UTF-8 encoding of ``text``.

        Raises:
            InputError: If ``text`` holds lone surrogates
        """
        try:
            return cls(text.encode("utf-8"))
        except UnicodeEncodeError as e:
            raise InputError(f"{field} is not valid Unicode text") from e

    def _require_open(self) -> bytearray:
        if self._closed:
            raise ValueError("SecretBuffer has been closed")
        return self._data

    def view(self) -> memoryview:
        """Read-only view of the secret bytes."""
        return memoryview(self._require_open()).toreadonly()

    def reveal(self) -> bytes:
        """Return an immutable copy of the secret bytes.

        The copy cannot be wiped; prefer ``view()`` or indexing.
        """
        return bytes(self._require_open())

    def close(self) -> None:
        """Zero the secret bytes. Safe to call more than once."""
        if not self._closed:
            CryptoUtils.secure_zero(self._data)
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._require_open())

    def __getitem__(self, index: Any) -> Any:
        return self._require_open()[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._require_open())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SecretBuffer):
            other_bytes = other.view()
        elif isinstance(other, (bytes, bytearray, memoryview)):
            other_bytes = other
        else:
            return NotImplemented
        return CryptoUtils.constant_time_compare(bytes(self._require_open()), bytes(other_bytes))

    __hash__ = None  # type: ignore[assignment]

    def __enter__(self) -> "SecretBuffer":
        return self

    def __exit__(self, exc_type: Optional[type], exc: Optional[BaseException], tb: Any) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except AttributeError:
            # __init__ failed before _data was set
            pass

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._data)} bytes"
        return f"SecretBuffer(<redacted>, {state})"

    __str__ = __repr__

    def __copy__(self) -> "SecretBuffer":
        raise TypeError("SecretBuffer cannot be copied")

    def __deepcopy__(self, memo: dict) -> "SecretBuffer":
        raise TypeError("SecretBuffer cannot be copied")

    def __reduce__(self) -> Any:
        raise TypeError("SecretBuffer cannot be pickled")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError("SecretBuffer cannot be pickled")
