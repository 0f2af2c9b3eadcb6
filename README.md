# watchman

Building blocks for screening names against sanctions lists.

The package covers:

- **Name preparation**: lower-casing, punctuation stripping and accent
  removal (`watchman.normalize.lower_and_remove_punctuation`), reordering
  "Surname, Given" names of individuals (`watchman.reorder.reorder_sdn_name`
  and `reorder_sdn_names`), dropping company suffixes such as `INC.`, `LLC`
  or `GMBH` (`watchman.company.remove_company_titles`), and normalising
  gender values to `"male"`, `"female"` or `"unknown"`
  (`watchman.gender.normalize_gender`).
- **Result tracking**: a bounded, weight-ordered collection of the best
  matches (`watchman.largest.Items` and `Item`) and streaming
  min/max/average/windowed-median statistics (`watchman.minmaxmed.Observor`).
- **Parallel work**: splitting a range into chunk boundaries
  (`watchman.indices.split_indices`) and running a function over a sequence
  on threads (`process_slice`, `process_slice_fn`), plus an adaptive
  `watchman.concurrency.ConcurrencyManager` that moves traffic towards the
  worker count with the fastest recorded durations.
- **Search request values**: parsing result limits, minimum match scores,
  dates, bounded integers, string lists and `CURRENCY:address` crypto
  addresses (`watchman.query`), default worker bounds derived from the CPU
  count (`watchman.config.default_config`), and the data refresh interval
  (`watchman.refresh`).
- **Comparison client**: `watchman.ofac_client.Client`, a small HTTP client
  that posts `SearchParams` to a sanctions list search service and returns
  `SearchResult` objects, raising `OFACSearchError` on failure.

## Installation

```
pip install .
```

## Examples

```python
from watchman.normalize import lower_and_remove_punctuation
from watchman.reorder import reorder_sdn_name
from watchman.company import remove_company_titles

reorder_sdn_name("MADURO MOROS, Nicolas", "individual")
# 'Nicolas MADURO MOROS'

remove_company_titles("MKS INTERNATIONAL CO. LTD.")
# 'MKS INTERNATIONAL'

lower_and_remove_punctuation("Nicolás Maduro")
# 'nicolas maduro'
```

Keep only the highest-scoring matches:

```python
from watchman.largest import Item, Items

best = Items(capacity=3, min_match=2.0)
for name, score in [("A", 1.5), ("B", 2.0), ("C", 3.0), ("D", 4.0), ("E", 5.0)]:
    best.add(Item(name, score))

[item.value for item in best.items()]
# ['E', 'D', 'C']
```

A capacity above 100 (or below 0) is treated as 100, and a `min_match` of
0.001 or less becomes 0.01.

Choose a worker count adaptively. Durations are given in seconds; the
manager runs background threads until `close()` is called (it is also a
context manager):

```python
from watchman.concurrency import ConcurrencyManager

with ConcurrencyManager(initial_champion=8, min_c=1, max_c=32) as manager:
    workers = manager.pick_concurrency()
    # ... run the work with `workers` threads ...
    manager.record_duration(workers, 0.125)
    print(manager.champion)
```

The refresh interval, in seconds, comes from the `DATA_REFRESH_INTERVAL`
environment variable (durations such as `1h`, `90m` or `1h30m`, parsed by
`watchman.refresh.parse_duration`), then from the configured value, then
12 hours:

```python
from watchman.refresh import DownloadConfig, refresh_interval

refresh_interval(DownloadConfig(refresh_interval=120.0))
# 120.0 unless DATA_REFRESH_INTERVAL is set
```

The comparison client needs the service address, taken from the
`OFAC_SEARCH_ENDPOINT` environment variable or set on `Client.endpoint`;
without one, `search` raises `OFACSearchError`.

## What this package does not do

It provides no HTTP server or command-line program, does not download or
parse sanctions list files, does not score the similarity between entities,
and does not parse postal addresses. It offers the pieces listed above for
building such a system.

## Running the tests

```
pip install .[test]
pytest
```