# SPDX-License-Identifier: Apache-2.0
"""
Vector ex03: Search modes

Demonstrates:
  • Embedding documents and reusing the vectors for upsert
  • search_by_vector with a range filter
  • search_by_keywords and search_by_scalar on the same index
  • A per-call deadline and retry budget through OperationContext
"""

import asyncio
import time

from examples.common.env import client_from_env, collection_from_env, index_from_env, setup_logging
from examples.common.printing import box, print_error, print_hits
from vikingdb_sdk.core.operation_context import OperationContext
from vikingdb_sdk.vector import (
    EmbeddingData,
    EmbeddingModelOpt,
    EmbeddingRequest,
    ErrorCode,
    ScalarOrder,
    SearchByKeywordsRequest,
    SearchByScalarRequest,
    SearchByVectorRequest,
    UpsertDataRequest,
    VikingDBError,
)

DENSE_MODEL = EmbeddingModelOpt(name="bge-m3", version="default")


async def main():
    setup_logging()
    box("Vector ex03: Search modes")

    chapters = [
        ("Vector intro", "Inline vector search example for the reference suite."),
        ("Vector deep dive", "Demonstrates embedding reuse for query vectors."),
    ]
    base = time.time_ns() % 1_000_000

    async with client_from_env() as client:
        collection = client.collection(collection_from_env())
        index = client.index(index_from_env())
        embedder = client.embedding()

        emb = await embedder.embedding(
            EmbeddingRequest(data=[EmbeddingData(text=text) for _, text in chapters], dense_model=DENSE_MODEL)
        )
        docs = [
            {"title": title, "paragraph": base + i, "score": 80.0 + i, "text": text, "vector": e.dense_vectors}
            for i, ((title, text), e) in enumerate(zip(chapters, emb.result.data))
        ]
        await collection.upsert(UpsertDataRequest(data=docs))
        await asyncio.sleep(3)

        query = await embedder.embedding(
            EmbeddingRequest(
                data=[EmbeddingData(text="Which chapter reuses embeddings for query vectors?")],
                dense_model=DENSE_MODEL,
            )
        )
        ctx = OperationContext(max_retries=5).with_timeout(10_000)

        box("search_by_vector")
        hits = await index.search_by_vector(
            SearchByVectorRequest(
                dense_vector=query.result.data[0].dense_vectors,
                filter={"op": "range", "field": "paragraph", "gte": base, "lt": base + len(chapters)},
                limit=3,
                output_fields=["title", "score", "paragraph"],
            ),
            ctx=ctx,
        )
        print_hits(hits, ["title", "paragraph"])

        box("search_by_keywords")
        try:
            hits = await index.search_by_keywords(
                SearchByKeywordsRequest(keywords=["embedding", "vectors"], limit=3, output_fields=["title"]),
                ctx=ctx,
            )
            print_hits(hits, ["title"])
        except VikingDBError as e:
            # keyword search needs a sparse/keyword capable index
            print_error(e)

        box("search_by_scalar")
        try:
            hits = await index.search_by_scalar(
                SearchByScalarRequest(field="score", order=ScalarOrder.DESC, limit=3, output_fields=["title", "score"]),
                ctx=ctx,
            )
            print_hits(hits, ["title", "score"])
        except VikingDBError as e:
            if e.code is ErrorCode.DEADLINE_EXCEEDED:
                print("deadline hit; the whole ex03 budget is 10s")
            print_error(e)

    print("\n[lesson] ex03: one OperationContext can bound several calls with a shared deadline.")


if __name__ == "__main__":
    asyncio.run(main())
