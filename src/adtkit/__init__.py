"""adtkit: algebraic data types for optional values, fallible computations,
request lifecycles and paginated collections.

Flat imports (preferred):
    from adtkit import Ok, Err, Just, Nothing, success, create_paginate

Submodule imports (for organization):
    from adtkit.types.result import Ok, Err, partition
    from adtkit.types.maybe import Just, Nothing, maybe
    from adtkit.remote import RemoteData, RemotePaginate
"""

# Types
from adtkit.types.maybe import (
    Just,
    Maybe,
    Nothing,
    NothingType,
    from_maybe,
    from_result,
    just,
    map_maybe,
    maybe,
    nothing,
)
from adtkit.types.result import (
    Err,
    Ok,
    Result,
    collect,
    err,
    from_err,
    from_ok,
    map_result,
    map_result_err,
    ok,
    partition,
)
from adtkit.types.tuple_ import Tuple, fst, map_fst, map_snd, pair, snd
from adtkit.types.non_empty import (
    NonEmptyArray,
    append_nea,
    from_iterable,
    head_nea,
    last_nea,
    length_nea,
    map_nea,
    non_empty_array,
    prepend_nea,
    tail_nea,
    to_list,
)
from adtkit.types.opaque import Opaque, json_value_create
from adtkit.types.json_value import JsonValue, decode, parse_json_value, to_json

# Request lifecycle
from adtkit.remote import (
    Failure,
    Loaded,
    Loading,
    LoadingMore,
    NoMore,
    NotAsked,
    PageError,
    Paginate,
    PaginateStatus,
    RemoteData,
    RemotePaginate,
    Success,
    append_paginate,
    create_paginate,
    decode_remote_data,
    failure,
    from_failure,
    from_success,
    loaded,
    loading,
    loading_more,
    map_paginate_meta,
    map_paginate_status,
    map_paginate_value,
    map_remote_data,
    map_remote_data_error,
    no_more,
    not_asked,
    page_error,
    prepend_paginate,
    success,
)

# Decorators
from adtkit.decorators import safe, safe_async

# Errors
from adtkit.errors import DecodeError, DecodeFailure, UnwrapError

# Configuration
from adtkit._config import AdtConfig, LogFormat, get_config, init

__all__ = [
    'AdtConfig',
    'DecodeError',
    'DecodeFailure',
    'Err',
    'Failure',
    'JsonValue',
    'Just',
    'Loaded',
    'Loading',
    'LoadingMore',
    'LogFormat',
    'Maybe',
    'NoMore',
    'NonEmptyArray',
    'NotAsked',
    'Nothing',
    'NothingType',
    'Ok',
    'Opaque',
    'PageError',
    'Paginate',
    'PaginateStatus',
    'RemoteData',
    'RemotePaginate',
    'Result',
    'Success',
    'Tuple',
    'UnwrapError',
    'append_nea',
    'append_paginate',
    'collect',
    'create_paginate',
    'decode',
    'decode_remote_data',
    'err',
    'failure',
    'from_err',
    'from_failure',
    'from_iterable',
    'from_maybe',
    'from_ok',
    'from_result',
    'from_success',
    'fst',
    'get_config',
    'head_nea',
    'init',
    'json_value_create',
    'just',
    'last_nea',
    'length_nea',
    'loaded',
    'loading',
    'loading_more',
    'map_fst',
    'map_maybe',
    'map_nea',
    'map_paginate_meta',
    'map_paginate_status',
    'map_paginate_value',
    'map_remote_data',
    'map_remote_data_error',
    'map_result',
    'map_result_err',
    'map_snd',
    'maybe',
    'no_more',
    'non_empty_array',
    'not_asked',
    'nothing',
    'ok',
    'page_error',
    'pair',
    'parse_json_value',
    'partition',
    'prepend_nea',
    'prepend_paginate',
    'safe',
    'safe_async',
    'snd',
    'success',
    'tail_nea',
    'to_json',
    'to_list',
]
