# SPDX-License-Identifier: Apache-2.0
"""
Vector ex06: Rerank

Demonstrates:
  • Scoring candidate documents against a query
  • Requests concurrently sharing one client
"""

import asyncio

from examples.common.env import client_from_env, setup_logging
from examples.common.printing import box, print_table
from vikingdb_sdk.vector import FullModalData, RerankRequest

CANDIDATES = [
    "VikingDB stores dense and sparse vectors.",
    "The weather in Beijing is sunny today.",
    "Rerank models reorder retrieved passages by relevance.",
]


async def main():
    setup_logging()
    box("Vector ex06: Rerank")

    async with client_from_env() as client:
        reranker = client.rerank()
        queries = ["How are search results reordered?", "What does VikingDB store?"]

        responses = await asyncio.gather(
            *(
                reranker.rerank(
                    RerankRequest(
                        model_name="m3-v2-rerank",
                        data=[[FullModalData(text=c)] for c in CANDIDATES],
                        query=[FullModalData(text=q)],
                    )
                )
                for q in queries
            )
        )

        for query, resp in zip(queries, responses):
            print(f"\nquery: {query}")
            ranked = sorted(resp.result.data, key=lambda item: -item.score)
            print_table(
                [{"id": item.id, "score": round(item.score, 4), "text": CANDIDATES[item.id]} for item in ranked],
                ["id", "score", "text"],
            )

    print("\n[lesson] ex06: one client serves concurrent calls; each call is independent.")


if __name__ == "__main__":
    asyncio.run(main())
