"""Error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'DecodeError',
    'DecodeFailure',
    'UnwrapError',
]


class UnwrapError(RuntimeError):
    """Raised when unwrapping an Err or Nothing."""


# --- Decode Errors ---


class DecodeFailure(msgspec.Struct, frozen=True, gc=False):
    """Input could not be decoded - struct variant for Result[DecodeFailure, T]."""

    message: str
    target: str | None = None

    def __str__(self) -> str:
        if self.target:
            return f'{self.target}: {self.message}'
        return self.message

    def to_exception(self) -> DecodeError:
        """Convert to exception for raise-based code."""
        return DecodeError(self.message, self.target)


class DecodeError(ValueError):
    """Input could not be decoded - exception variant."""

    def __init__(self, message: str, target: str | None = None) -> None:
        self.message = message
        self.target = target
        super().__init__(f'{target}: {message}' if target else message)

    def to_struct(self) -> DecodeFailure:
        """Convert to struct for Result-based code."""
        return DecodeFailure(self.message, self.target)
