# SPDX-License-Identifier: Apache-2.0
"""
Vector ex01: Connectivity

Demonstrates:
  • Building an IAM-authenticated client from the environment
  • One random search as a smoke test, with a caller-chosen request id
  • Console metrics for every call
"""

import asyncio

from examples.common.env import client_from_env, index_from_env, new_request_id, setup_logging
from examples.common.metrics_console import ConsoleMetrics
from examples.common.printing import box, print_error, print_kv
from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector import SearchByRandomRequest, VikingDBError


async def main():
    setup_logging()
    box("Vector ex01: Connectivity")

    async with client_from_env(metrics=ConsoleMetrics()) as client:
        index = client.index(index_from_env())
        ctx = OperationContext(request_id=new_request_id())
        try:
            resp = await index.search_by_random(SearchByRandomRequest(limit=1), ctx=ctx)
        except VikingDBError as e:
            print_error(e)
            raise SystemExit(1)

        print_kv(
            {
                "endpoint": client.config.endpoint,
                "sent_request_id": ctx.request_id,
                "server_request_id": resp.request_id,
                "hits": len(resp.result.data) if resp.result else 0,
            }
        )

    print("\n[lesson] ex01: one client per process; scoped clients are cheap handles.")


if __name__ == "__main__":
    asyncio.run(main())
