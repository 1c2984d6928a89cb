"""Request lifecycle types: RemoteData and RemotePaginate."""

from adtkit.remote.data import (
    Failure,
    Loading,
    NotAsked,
    RemoteData,
    Success,
    decode_remote_data,
    failure,
    from_failure,
    from_result,
    from_success,
    loading,
    map_remote_data,
    map_remote_data_error,
    not_asked,
    success,
)
from adtkit.remote.paginate import (
    Loaded,
    LoadingMore,
    NoMore,
    PageError,
    Paginate,
    PaginateStatus,
    RemotePaginate,
    append_paginate,
    create_paginate,
    loaded,
    loading_more,
    map_paginate_meta,
    map_paginate_status,
    map_paginate_value,
    no_more,
    page_error,
    prepend_paginate,
)

__all__ = [
    'Failure',
    'Loaded',
    'Loading',
    'LoadingMore',
    'NoMore',
    'NotAsked',
    'PageError',
    'Paginate',
    'PaginateStatus',
    'RemoteData',
    'RemotePaginate',
    'Success',
    'append_paginate',
    'create_paginate',
    'decode_remote_data',
    'failure',
    'from_failure',
    'from_result',
    'from_success',
    'loaded',
    'loading',
    'loading_more',
    'map_paginate_meta',
    'map_paginate_status',
    'map_paginate_value',
    'map_remote_data',
    'map_remote_data_error',
    'no_more',
    'not_asked',
    'page_error',
    'prepend_paginate',
    'success',
]
