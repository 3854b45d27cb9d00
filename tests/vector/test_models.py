# SPDX-License-Identifier: Apache-2.0
"""
Vector: request serialization rules of the data-transfer types.
"""

from decimal import Decimal

from vikingdb_sdk.vector import (
    AggRequest,
    CollectionLocator,
    CommonResponse,
    DeleteDataRequest,
    EmbeddingData,
    EmbeddingModelOpt,
    EmbeddingRequest,
    FullModalData,
    IndexLocator,
    RerankItem,
    ScalarOrder,
    SearchAdvance,
    SearchByVectorRequest,
    SearchItemResult,
    UpsertDataRequest,
)


def test_unset_optional_fields_are_omitted():
    assert UpsertDataRequest(data=[{"id": 1}]).to_dict() == {"data": [{"id": 1}]}
    assert DeleteDataRequest(del_all=True).to_dict() == {"ids": [], "del_all": True}


def test_async_flag_uses_wire_name():
    body = UpsertDataRequest(data=[], ttl=10, ignore_unknown_fields=False, async_=True).to_dict()
    assert body == {"data": [], "ttl": 10, "ignore_unknown_fields": False, "async": True}


def test_nested_search_options_and_enums_flatten():
    body = SearchByVectorRequest(
        dense_vector=[1.0],
        limit=3,
        advance=SearchAdvance(ids_in=[1, 2], filter_pre_ann_ratio=0.5),
    ).to_dict()

    assert body == {
        "limit": 3,
        "advance": {"ids_in": [1, 2], "filter_pre_ann_ratio": 0.5},
        "dense_vector": [1.0],
    }
    assert AggRequest(field="tag", order=ScalarOrder.DESC).to_dict() == {
        "op": "count",
        "field": "tag",
        "order": "desc",
    }


def test_embedding_request_nested_shapes():
    body = EmbeddingRequest(
        data=[EmbeddingData(full_modal_seq=[FullModalData(text="a"), FullModalData(image="img://1")])],
        sparse_model=EmbeddingModelOpt(name="bge-m3"),
    ).to_dict()

    assert body == {
        "data": [{"full_modal_seq": [{"text": "a"}, {"image": "img://1"}]}],
        "sparse_model": {"name": "bge-m3"},
    }


def test_locators():
    coll = CollectionLocator("docs")
    assert coll.to_dict() == {"collection_name": "docs", "resource_id": ""}

    index = IndexLocator.of(CollectionLocator("docs", project_name="p"), "idx")
    assert index.to_dict() == {
        "collection_name": "docs",
        "project_name": "p",
        "resource_id": "",
        "index_name": "idx",
    }
    assert index.collection == CollectionLocator("docs", project_name="p")


def test_common_response_tolerates_missing_fields():
    resp = CommonResponse.from_dict({"code": "Success"})
    assert resp == CommonResponse(code="Success")


def test_hit_scores_decode_to_float_and_default_to_zero():
    hit = SearchItemResult.from_dict({"id": 1, "ann_score": Decimal("0.25"), "score": 3})
    assert hit.ann_score == 0.25 and isinstance(hit.ann_score, float)
    assert hit.score == 3.0 and isinstance(hit.score, float)

    bare = SearchItemResult.from_dict({"id": 2})
    assert (bare.ann_score, bare.score) == (0.0, 0.0)

    ranked = RerankItem.from_dict({"id": 0, "score": Decimal("0.5")})
    assert ranked.score == 0.5 and isinstance(ranked.score, float)
    assert RerankItem.from_dict({"id": 1}).score == 0.0
