# SPDX-License-Identifier: Apache-2.0
"""
Vector ex02: Document lifecycle

Demonstrates:
  • upsert → multimodal search → update → fetch → delete on one document
  • Numbers in fetched documents come back lossless (int or Decimal)
"""

import asyncio
import time

from examples.common.env import client_from_env, collection_from_env, index_from_env, setup_logging
from examples.common.printing import box, print_hits, print_kv
from vikingdb_sdk.vector import (
    DeleteDataRequest,
    FetchDataInCollectionRequest,
    SearchByMultiModalRequest,
    UpdateDataRequest,
    UpsertDataRequest,
)


async def main():
    setup_logging()
    box("Vector ex02: Document lifecycle")

    async with client_from_env() as client:
        collection = client.collection(collection_from_env())
        index = client.index(index_from_env())

        chapter = {
            "title": "Lifecycle quickstart",
            "paragraph": time.time_ns() % 1_000_000,
            "score": 42.5,
            "text": "Simple lifecycle payload written inline for the reference flow.",
        }
        upserted = await collection.upsert(UpsertDataRequest(data=[chapter]))
        print_kv({"upsert_request_id": upserted.request_id})

        await asyncio.sleep(2)  # let the index catch up

        found = await index.search_by_multi_modal(
            SearchByMultiModalRequest(
                text="Need the lifecycle quickstart chapter overview",
                need_instruction=False,
                limit=1,
                output_fields=["title", "score"],
            )
        )
        print_hits(found, ["title", "score"])
        if not found.result or not found.result.data:
            raise SystemExit("search returned no hits")
        chapter_id = found.result.data[0].id

        await collection.update(
            UpdateDataRequest(data=[{"__AUTO_ID__": chapter_id, "score": 47.0, "text": "Updated payload."}])
        )

        fetched = await collection.fetch(FetchDataInCollectionRequest(ids=[chapter_id]))
        if fetched.result and fetched.result.items:
            score = fetched.result.items[0].fields.get("score")
            print_kv({"fetched_score": score, "type": type(score).__name__})

        deleted = await collection.delete(DeleteDataRequest(ids=[chapter_id]))
        print_kv({"delete_request_id": deleted.request_id, "removed_id": chapter_id})

    print("\n[lesson] ex02: every call returns the common envelope (request_id, code, message).")


if __name__ == "__main__":
    asyncio.run(main())
