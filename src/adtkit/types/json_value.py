"""JsonValue: the JSON data model, strict parsing and serialization.

Decoding goes through `msgspec.json`, which implements RFC 8259 strictly:
no trailing commas, comments, unquoted keys or NaN/Infinity literals.
Decode failures never escape as exceptions; they come back as `Err`. That
includes nesting too deep for the decoder and bytes that are not valid UTF-8.

Known limitation: msgspec rejects lone surrogate escapes such as
``"\\ud800"``, which RFC 8259 permits, and reports them as truncated input.
"""

from __future__ import annotations

from typing import Any, get_origin

import msgspec

from adtkit._logging import get_logger
from adtkit.decorators.safe import safe
from adtkit.errors import DecodeFailure
from adtkit.types.opaque import Opaque
from adtkit.types.result import Result

__all__ = ['JsonValue', 'decode', 'parse_json_value', 'to_json']

logger = get_logger(__name__)

type JsonValue = str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, Opaque):
        return obj.unwrap()
    raise TypeError(f'Objects of type {type(obj).__name__} are not JSON serializable')


def _dec_hook(type_: type, obj: Any) -> Any:
    if isinstance(type_, type) and issubclass(type_, Opaque):
        return type_(obj)
    raise NotImplementedError(f'Cannot decode into {type_!r}')


def _type_name(type_: Any) -> str | None:
    if type_ is Any:
        return None
    if get_origin(type_) is not None:
        return repr(type_)
    return getattr(type_, '__name__', repr(type_))


@safe(exceptions=(msgspec.DecodeError, RecursionError, UnicodeDecodeError))
def _decode(text: str | bytes, type_: Any) -> Any:
    return msgspec.json.decode(text, type=type_, strict=True, dec_hook=_dec_hook)


def decode[T](text: str | bytes, type_: type[T] | Any = Any) -> Result[DecodeFailure, T]:
    """Decode JSON text, optionally validating it against `type_`.

    `type_` may be anything msgspec understands (builtins, Structs, unions of
    tagged Structs such as RemoteData) or an Opaque subclass.

    Args:
        text: JSON document as str or bytes.
        type_: Expected type of the decoded value. Defaults to Any.

    Returns:
        Ok(value) on success, Err(DecodeFailure) otherwise.

    Examples:
        >>> decode('[1, 2]', list[int])
        Ok(value=[1, 2])
        >>> decode('[1, "x"]', list[int]).is_err()
        True
    """
    target = _type_name(type_)
    result = _decode(text, type_)
    if result.is_err():
        logger.debug('json_decode_failed', target=target, error=str(result.error))
    return result.map_err(lambda exc: DecodeFailure(str(exc), target))


def parse_json_value(text: str | bytes) -> Result[str, JsonValue]:
    """Parse a JSON document into a JsonValue.

    Either the whole input parses or the call fails as a whole; the error
    message is human readable but not a stable contract.

    Examples:
        >>> parse_json_value('{"a": 1, "b": [true, null]}')
        Ok(value={'a': 1, 'b': [True, None]})
        >>> parse_json_value('{bad json').is_err()
        True
    """
    return decode(text).map_err(str)


def to_json(value: Any) -> str:
    """Serialize a JsonValue, tagged struct or Opaque value to JSON text.

    Raises:
        TypeError: If the value contains something that is not serializable.
    """
    return msgspec.json.encode(value, enc_hook=_enc_hook).decode()
