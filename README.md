# pikodb

A pico-sized, in-memory vector database library. Points (an id, an embedding
vector and optional string metadata) are stored in named collections and
found again by cosine similarity through an HNSW graph index. The whole
database can be saved to a single JSON file and loaded back.

## Installation

```
pip install pikodb
```

## Quick start

```python
from pikodb.client import Client
from pikodb.embedding import EmbeddingType, Point
from pikodb.index import IndexConfig
from pikodb.search import EfSearch

client = Client.in_memory()
client.create_collection("docs", IndexConfig.standard(EmbeddingType.TEXT_EMBEDDING_3_SMALL))

dimension = EmbeddingType.TEXT_EMBEDDING_3_SMALL.dimension()
client.upsert_points("docs", [
    Point(vector=[1.0] + [0.0] * (dimension - 1), metadata={"lang": "en"}),
    Point(vector=[0.0, 1.0] + [0.0] * (dimension - 2), metadata={"lang": "de"}),
])

query = [1.0] + [0.0] * (dimension - 1)
nearest = client.query("docs", query, limit=1, ef=EfSearch.BALANCED)
german = client.query_with_filter("docs", query, 1, EfSearch.ACCURATE, [{"lang": "de"}])
```

A `Point` gets a random UUID as its `id` unless one is given. Its vector is
stored as a list of floats.

### Collections

- `Client.create_collection(name, index_config)` creates a collection; if the
  name is already taken it does nothing.
- `Client.get_collection(name)` returns the `Collection`, or raises
  `CollectionNotFoundError`.
- `Client.get_or_create_collection(name, index_config)` does both.
- `Client.upsert_points`, `Client.query` and `Client.query_with_filter` work
  on a collection by name; the same operations are available directly on a
  `Collection` as `upsert`, `search` and `search_with_filter`.

### Embedding types

| Type | Dimension |
| --- | --- |
| `EmbeddingType.TEXT_EMBEDDING_3_SMALL` | 1536 |
| `EmbeddingType.TEXT_EMBEDDING_3_LARGE` | 3072 |

A vector whose length differs from the collection's dimension is rejected
with `DimensionMismatchError`.

### Index build quality and search effort

`IndexConfig.quick`, `IndexConfig.standard` and `IndexConfig.robust` choose
how thoroughly the index is built (construction breadth 100, 200 or 400, the
values of `IndexBuildQuality`). `EfSearch.FAST`, `EfSearch.BALANCED` and
`EfSearch.ACCURATE` choose how widely a query explores (50, 200 or 500
candidates). Results come back closest first.

The graph index itself is `pikodb.hnsw.HnswIndex`, usable on its own: its
`insert(vector, data_id)` adds a node and `search(query, k, ef)` returns
`Neighbour` records (`d_id`, `distance`, `p_id`).

### Metadata filters

A filter is a dictionary of metadata keys and values. A point matches a
filter when every pair is present in its metadata; a point is returned when
it matches any of the filters given. An empty list of filters matches every
point. With filters, five times `limit` candidates
(`pikodb.search.DEFAULT_OVERFETCH_FACTOR`) are fetched from the index before
filtering, so fewer than `limit` results may come back when matches are rare.

### Upserts

Upserting a point whose id is already present replaces the stored point in
place; new ids are appended. The index gains a new node on every upsert and
keeps the node for the earlier vector, so after repeated upserts of one id a
search may return that point more than once.

## Persistence

```python
from pathlib import Path
from pikodb.client import Client
from pikodb.persistence import Persistence

client = Client.persistent(Persistence.filesystem(Path("vectors.db")))
# ... create collections, upsert points ...
client.persist()
```

`FileSystemPersistenceAdapter` writes the state as JSON. `Client.persistent`
loads the file at once, so it must already exist; a missing or unreadable
file raises `FileOperationError`, and a damaged one raises
`DeserializationError`. Indexes are not stored; they are rebuilt from the
points on load. Calling `persist` on an in-memory client raises
`NotConfiguredError`. Other storage backends can be written by subclassing
`PersistenceAdapter` and passing an instance to `Persistence`.

## Errors

All errors derive from `pikodb.errors.VectorDbError`:

- `DimensionMismatchError`
- `CollectionNotFoundError`
- `PersistenceError`, with `SerializationError`, `DeserializationError`,
  `FileOperationError` and `NotConfiguredError`

## What it does not do

pikodb is a library used from Python code only. It has no server, no network
interface and no command-line tool. Points cannot be deleted, collections
cannot be dropped, and persistence happens only when `persist` is called.

## Running the tests

```
pip install -e ".[test]"
pytest
```