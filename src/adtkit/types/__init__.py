"""Core types: Result, Maybe, Tuple, NonEmptyArray, JsonValue, Opaque."""

from adtkit.types.maybe import Just, Maybe, Nothing, NothingType
from adtkit.types.result import Err, Ok, Result, collect, partition
from adtkit.types.tuple_ import Tuple
from adtkit.types.non_empty import NonEmptyArray
from adtkit.types.opaque import Opaque
from adtkit.types.json_value import JsonValue, decode, parse_json_value, to_json

__all__ = [
    'Err',
    'JsonValue',
    'Just',
    'Maybe',
    'NonEmptyArray',
    'Nothing',
    'NothingType',
    'Ok',
    'Opaque',
    'Result',
    'Tuple',
    'collect',
    'decode',
    'parse_json_value',
    'partition',
    'to_json',
]
