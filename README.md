# islandpaths

`islandpaths` reads a description of islands joined by bridges, works out the
shortest distance between every pair of islands, and prints every route that
reaches that shortest distance.

## Installation

```
pip install .
```

## Input format

The first line holds the number of islands. Each following line describes one
bridge as `From-To,length`:

```
4
Greenland-Bananal,8
Fraser-Greenland,10
Bananal-Fraser,3
Java-Fraser,5
```

Rules checked while reading:

- the island count is a positive whole number without a leading zero;
- island names are made of ASCII letters only, and a bridge may not join an
  island to itself;
- bridge lengths are positive whole numbers without a leading zero;
- the same pair of islands may be joined only once, in either direction;
- the sum of all bridge lengths may not exceed 2147483647;
- the number of distinct islands named must equal the count on the first line;
- blank lines are ignored, but at least one bridge line is required.

## Command line

```
islandpaths islands.txt
```

For each pair of islands that can reach each other, the output shows a block
like this one (taken from the input above):

```
========================================
Path: Greenland -> Java
Route: Greenland -> Fraser -> Java
Distance: 10 + 5 = 15
========================================
```

When a route has a single bridge, the `Distance:` line shows just its length.
When more than one route has the same shortest length, each one is printed in
its own block. Each pair of islands is reported once, starting from the island
that was named first in the file.

If the command is not given exactly one file name it prints
`usage: ./pathfinder [filename]` on standard error. A missing or empty file,
or input that breaks one of the rules above, prints a message such as
`error: line 3 is not valid`, `error: duplicate bridges` or
`error: invalid number of islands` on standard error. In both cases the exit
status is 1; on success it is 0.

## Library use

```python
import sys

from islandpaths.parser import parse_file, parse_text
from islandpaths.paths import dijkstra, iter_routes, render_report, write_report

graph = parse_text("3\nA-B,1\nB-C,2\n")
print(render_report(graph), end="")

source = graph.index_of("A")
distances, parents = dijkstra(graph, source)
for route in iter_routes(graph, source, graph.index_of("C"), parents):
    print([graph.names[i] for i in route])

write_report(parse_file("islands.txt"), sys.stdout)
```

The modules are:

- `islandpaths.graph` – `Graph`, `Bridge` and `GraphError`: an undirected
  weighted graph with a fixed number of named island slots. `Graph` offers
  `index_of`, `add_edge`, `neighbours` and `bridge_weight`.
- `islandpaths.heap` – `MinHeap`, `HeapNode` and `HeapOverflowError`: a
  fixed-capacity priority queue with `push`, `pop` and `decrease_key`.
- `islandpaths.parser` – `read_source`, `parse_text`, `parse_file`,
  `validate_first_line`, `validate_line` and `is_number`; problems raise
  `ParseError`.
- `islandpaths.paths` – `dijkstra` (distances, with `None` for unreachable
  islands, and parent lists), `iter_routes`, `format_route`, `render_report`
  and `write_report`.
- `islandpaths.textutil` – small string and number helpers such as `atoi`,
  `split_words`, `strtrim`, `del_extra_spaces`, `replace_substr`,
  `hex_to_nbr`, `nbr_to_hex`, `binary_search`, `bubble_sort`, `quicksort`,
  `int_sqrt` and `power`.
- `islandpaths.cli` – `main`, behind the `islandpaths` command.

## Running the tests

```
pip install .[test]
pytest
```