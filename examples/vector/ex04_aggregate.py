# SPDX-License-Identifier: Apache-2.0
"""
Vector ex04: Aggregation

Demonstrates:
  • Writing two documents and counting them grouped by `paragraph`
"""

import asyncio
import time

from examples.common.env import client_from_env, collection_from_env, index_from_env, setup_logging
from examples.common.printing import box, print_kv
from vikingdb_sdk.vector import AggRequest, UpsertDataRequest


async def main():
    setup_logging()
    box("Vector ex04: Aggregation")
    base = time.time_ns() % 1_000_000

    async with client_from_env() as client:
        collection = client.collection(collection_from_env())
        index = client.index(index_from_env())

        for i, (title, score) in enumerate([("Aggregate intro", 70.0), ("Aggregate follow-up", 82.0)]):
            resp = await collection.upsert(
                UpsertDataRequest(
                    data=[{"title": title, "paragraph": base + i, "score": score, "text": f"Aggregation payload {i + 1}."}]
                )
            )
            print_kv({"upsert_request_id": resp.request_id})

        await asyncio.sleep(2)

        agg = await index.aggregate(AggRequest(op="count", field="paragraph", cond={"gte": base}))
        print_kv({"request_id": agg.request_id, "op": agg.result.op, "agg": agg.result.agg})


if __name__ == "__main__":
    asyncio.run(main())
