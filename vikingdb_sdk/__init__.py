# vikingdb_sdk/__init__.py
# SPDX-License-Identifier: Apache-2.0

"""Async Python client for the VikingDB vector service."""

from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector.auth import Auth
from vikingdb_sdk.vector.client import VikingDBClient
from vikingdb_sdk.vector.config import VERSION
from vikingdb_sdk.vector.errors import ErrorCode, VikingDBError

__version__ = VERSION

__all__ = [
    "Auth",
    "ErrorCode",
    "OperationContext",
    "VikingDBClient",
    "VikingDBError",
    "__version__",
]
