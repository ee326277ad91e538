# graaf

A small graph library with no dependencies outside the standard library.
It offers directed and undirected graphs holding any Python objects as
vertices and edges, a set of classic graph algorithms, and export to the
Graphviz DOT format.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs

```python
from graaf.graph import DirectedGraph, UndirectedGraph

graph = UndirectedGraph()
a = graph.add_vertex("a")
b = graph.add_vertex("b")
c = graph.add_vertex("c", 10)      # ask for a specific vertex id

graph.add_edge(a, b, 3)
graph.add_edge(b, c, 4)

graph.vertex_count()               # 3
graph.edge_count()                 # 2
graph.has_edge(b, a)               # True: undirected edges work both ways
graph.get_edge(a, b)               # 3
graph.get_edge((a, b))             # 3, looked up by edge id
graph.get_neighbors(b)             # {a, c}
```

`Graph(GraphType.DIRECTED)` and `Graph(GraphType.UNDIRECTED)` are the same
as `DirectedGraph()` and `UndirectedGraph()`.

- Vertex ids are integers. Without an explicit id, `add_vertex` hands out
  the next free one; asking for an id that is taken raises `ValueError`.
- `get_vertex` and `get_edge` raise `ValueError` when there is no such
  vertex or edge; `add_edge` raises `ValueError` when either vertex is
  missing.
- Adding an edge that already exists keeps the edge already stored.
- In an undirected graph an edge id is stored with the smaller vertex id
  first, so `get_edges()` shows `(1, 4)` for an edge added as `(4, 1)`.
- `get_vertices()` and `get_edges()` return read-only mappings.
- `remove_vertex` also removes every edge touching the vertex; removing an
  unknown vertex or edge does nothing.

## Edge weights

`graaf.edge.get_weight` decides how much an edge weighs:

- numbers are their own weight;
- subclasses of `graaf.edge.WeightedEdge` report their weight through
  their `get_weight()` method;
- anything else weighs 1.

## Algorithms

All algorithms live under `graaf.algorithm`:

| Module | Function | Graphs | Result |
| --- | --- | --- | --- |
| `bfs_shortest_path` | `bfs_shortest_path(graph, start, end)` | any | `GraphPath` with the fewest edges, or `None` |
| `dijkstra_shortest_path` | `dijkstra_shortest_path(graph, start, end)` | any | lightest `GraphPath`, or `None`; `ValueError` on a negative edge weight |
| `bellman_ford` | `bellman_ford_shortest_paths(graph, start)` | any | dict from vertex id to `GraphPath`; `ValueError` on a negative cycle |
| `floyd_warshall` | `floyd_warshall_shortest_paths(graph)` | any | matrix of distances |
| `kruskal` | `kruskal_minimum_spanning_tree(graph)` | undirected | list of edge ids of a minimum spanning tree or forest |
| `prim` | `prim_minimum_spanning_tree(graph, start)` | undirected | list of edge ids, or `None` if the graph is not connected |
| `bron_kerbosch` | `bron_kerbosch(graph)` | undirected | list of maximal cliques, each a list of vertex ids |
| `dfs_cycle_detection` | `dfs_cycle_detection(graph)` | any | `True` if there is a cycle |
| `dfs_topological_sorting` | `dfs_topological_sort(graph)` | directed | list of vertex ids, or `None` if there is a cycle |
| `utils` | `get_transposed_graph(graph)` | directed | new `DirectedGraph` with every edge reversed |

Functions limited to one kind of graph raise `ValueError` when given the
other kind.

Some details worth knowing:

- `GraphPath` (from `graaf.algorithm.common`) is a dataclass with
  `vertices` (the vertex ids along the path) and `total_weight`. For the
  breadth-first search the total weight is the number of edges.
- `bellman_ford_shortest_paths` relaxes each edge in the direction it is
  stored. Vertices that cannot be reached map to a path holding only
  themselves with a total weight of `math.inf`.
- `floyd_warshall_shortest_paths` expects vertex ids `0` to `n - 1` and uses
  them as row and column indices; pairs without a path hold `math.inf`.
- `kruskal_minimum_spanning_tree` returns edges in the order they were
  chosen: by weight, ties broken by vertex ids.
- `prim_minimum_spanning_tree` gives each edge as
  `(vertex already in the tree, vertex added)`.
- `get_transposed_graph` keeps vertex ids, but only carries over vertices
  that have at least one edge.

```python
from graaf.algorithm.dijkstra_shortest_path import dijkstra_shortest_path

path = dijkstra_shortest_path(graph, a, c)
path.vertices        # [a, b, c]
path.total_weight    # 7
```

## DOT export

```python
from graaf.io.dot import to_dot

to_dot(graph, "graph.dot")
```

By default each vertex is labelled `"<id>: <value>"` and each edge with its
weight (floats with six decimals). Pass `vertex_writer(vertex_id, vertex)`
or `edge_writer(edge_id, edge)` to write other attributes; each returns the
text placed between the square brackets.

## What it does not do

The package is a library only: it has no command-line tool, and it writes
DOT files but does not read them or any other graph format.