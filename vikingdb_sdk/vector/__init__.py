# vikingdb_sdk/vector/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""
VikingDB vector service client - Public API

All public types are re-exported here for clean imports:

    from vikingdb_sdk.vector import VikingDBClient, Auth, IndexLocator
"""

from vikingdb_sdk.vector.auth import (
    Auth,
    AuthKind,
    Authenticator,
    NoAuth,
    APIKeyAuth,
    IAMAuth,
)
from vikingdb_sdk.vector.client import VikingDBClient
from vikingdb_sdk.vector.collection_client import CollectionClient
from vikingdb_sdk.vector.config import (
    VERSION,
    DEFAULT_ENDPOINT,
    DEFAULT_REGION,
    DEFAULT_TIMEOUT_S,
    DEFAULT_MAX_RETRIES,
    DEFAULT_USER_AGENT,
    Config,
    DEFAULT_CONFIG,
    ClientOption,
    build_config,
    with_endpoint,
    with_region,
    with_timeout,
    with_max_retries,
    with_http_client,
    with_user_agent,
)
from vikingdb_sdk.vector.embedding_client import EmbeddingClient
from vikingdb_sdk.vector.errors import (
    ErrorCode,
    VikingDBError,
    is_retryable_error,
    invalid_parameter_error,
    unauthorized_error,
    forbidden_error,
    not_found_error,
    service_unavailable_error,
    timeout_error,
    request_limit_exceeded_error,
    deadline_exceeded_error,
)
from vikingdb_sdk.vector.index_client import IndexClient
from vikingdb_sdk.vector.model import *  # noqa: F401,F403
from vikingdb_sdk.vector.model import __all__ as _model_all
from vikingdb_sdk.vector.rerank_client import RerankClient
from vikingdb_sdk.vector.signer import Signer, V4Signer
from vikingdb_sdk.vector.transport import REQUEST_ID_HEADER, Transport, decode_response

__all__ = [
    # Entry point
    "VikingDBClient",
    "CollectionClient",
    "IndexClient",
    "EmbeddingClient",
    "RerankClient",

    # Credentials and signing
    "Auth",
    "AuthKind",
    "Authenticator",
    "NoAuth",
    "APIKeyAuth",
    "IAMAuth",
    "Signer",
    "V4Signer",

    # Configuration
    "VERSION",
    "DEFAULT_ENDPOINT",
    "DEFAULT_REGION",
    "DEFAULT_TIMEOUT_S",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_USER_AGENT",
    "Config",
    "DEFAULT_CONFIG",
    "ClientOption",
    "build_config",
    "with_endpoint",
    "with_region",
    "with_timeout",
    "with_max_retries",
    "with_http_client",
    "with_user_agent",

    # Errors
    "ErrorCode",
    "VikingDBError",
    "is_retryable_error",
    "invalid_parameter_error",
    "unauthorized_error",
    "forbidden_error",
    "not_found_error",
    "service_unavailable_error",
    "timeout_error",
    "request_limit_exceeded_error",
    "deadline_exceeded_error",

    # Transport
    "REQUEST_ID_HEADER",
    "Transport",
    "decode_response",
] + list(_model_all)
