# SPDX-License-Identifier: Apache-2.0
"""
Vector ex05: Embedding

Demonstrates:
  • Multimodal dense embedding (full_modal_seq)
  • Dense + sparse embedding with one model
"""

import asyncio

from examples.common.env import client_from_env, setup_logging
from examples.common.printing import box, print_kv
from vikingdb_sdk.vector import EmbeddingData, EmbeddingModelOpt, EmbeddingRequest, FullModalData


async def main():
    setup_logging()

    async with client_from_env() as client:
        embedder = client.embedding()

        box("Vector ex05: Multimodal embedding")
        resp = await embedder.embedding(
            EmbeddingRequest(
                data=[EmbeddingData(full_modal_seq=[FullModalData(text="Short multimodal prompt.")])],
                dense_model=EmbeddingModelOpt(name="doubao-embedding-vision", version="250615"),
            )
        )
        print_kv({"request_id": resp.request_id, "dense_dims": len(resp.result.data[0].dense_vectors or [])})

        box("Vector ex05: Dense + sparse")
        resp = await embedder.embedding(
            EmbeddingRequest(
                data=[EmbeddingData(text="Reference dense and sparse embedding request.")],
                dense_model=EmbeddingModelOpt(name="bge-m3"),
                sparse_model=EmbeddingModelOpt(name="bge-m3"),
            )
        )
        first = resp.result.data[0]
        top_terms = sorted((first.sparse_vectors or {}).items(), key=lambda kv: -kv[1])[:5]
        print_kv(
            {
                "request_id": resp.request_id,
                "dense_dims": len(first.dense_vectors or []),
                "top_sparse_terms": dict(top_terms),
                "token_usage": resp.result.token_usage,
            }
        )


if __name__ == "__main__":
    asyncio.run(main())
