import json
import uuid

import pytest

from pikodb.embedding import EmbeddingType, Point


def test_dimensions():
    assert EmbeddingType.TEXT_EMBEDDING_3_SMALL.dimension() == 1536
    assert EmbeddingType.TEXT_EMBEDDING_3_LARGE.dimension() == 3072


def test_new_points_get_distinct_v4_ids():
    a = Point([1.0, 2.0])
    b = Point([1.0, 2.0])
    assert a.id != b.id
    assert a.id.version == 4
    assert a.metadata is None


def test_explicit_id_is_kept():
    pid = uuid.uuid4()
    point = Point([0.5], {"lang": "en"}, id=pid)
    assert point.id == pid
    assert point.metadata == {"lang": "en"}


def test_vector_values_become_floats():
    point = Point([1, 2, 3])
    assert point.vector == [1.0, 2.0, 3.0]
    assert all(isinstance(x, float) for x in point.vector)


def test_round_trip_with_metadata():
    point = Point([0.25, -1.5], {"kind": "doc", "lang": "en"})
    restored = Point.from_dict(point.to_dict())
    assert restored == point


def test_round_trip_without_metadata_through_json():
    point = Point([3.0, 4.0])
    restored = Point.from_dict(json.loads(json.dumps(point.to_dict())))
    assert restored == point
    assert restored.metadata is None


def test_to_dict_does_not_share_metadata():
    point = Point([1.0], {"a": "b"})
    data = point.to_dict()
    data["metadata"]["a"] = "changed"
    assert point.metadata == {"a": "b"}


def test_from_dict_rejects_bad_id():
    with pytest.raises(ValueError):
        Point.from_dict({"id": "not-a-uuid", "vector": [1.0], "metadata": None})