# graphsolvers

A small toolkit for experimenting with optimisation problems on Euclidean
graphs in the plane. It can:

- generate a set of unique random points in a rectangle,
- build the complete graph on them, with each edge weighted by Euclidean distance,
- run a solver that picks a set of edges,
- write an SVG picture that shows the points, their Delaunay triangulation
  (grey) and the edges the solver picked (red).

It has no third-party dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
graphsolvers
```

This generates 15 random points in the square `[0, 40] × [0, 40]`, builds the
complete graph on them, runs the solver and writes `visualization.svg` to the
current directory.

Options:

- `-n`, `--points N`: number of random vertices (default 15).
- `-o`, `--output FILE`: SVG file to write (default `visualization.svg`).
- `--seed SEED`: seed for the random generator, for repeatable runs.

For example:

```
graphsolvers -n 30 --seed 7 -o graph.svg
```

## Library use

```python
import random

from graphsolvers.primitives import Point, Edge, euclidean, generate_unique_points
from graphsolvers.subsets import generate_subsets
from graphsolvers.solver import solve_problem
from graphsolvers.visualization import delaunay_triangles, render_svg, draw_svg
from graphsolvers.cli import complete_graph

rng = random.Random(42)
points = generate_unique_points(10, rng=rng)   # sorted by (x, y)
edges = complete_graph(points)                 # list[Edge] with u < v
chosen = solve_problem(points, edges, rng=rng) # list of (u, v) pairs

svg_text = render_svg(points, chosen)          # SVG document as a string
draw_svg(points, chosen, "out.svg")            # or write it to a file
```

### `graphsolvers.primitives`

- `Point(x, y)`: a frozen dataclass, ordered lexicographically by `(x, y)`.
- `Edge(u, v, cost)`: a frozen dataclass for an undirected edge between two
  vertex indices.
- `euclidean(a, b)` returns the straight-line distance between two points.
- `generate_unique_points(n, min_x=0.0, min_y=0.0, max_x=40.0, max_y=40.0, rng=None)`
  samples uniform points in the rectangle. It draws at most `10 * n` samples;
  if that does not give `n` distinct points, it issues a `RuntimeWarning` and
  returns the points it has. The result is sorted by `(x, y)`.

### `graphsolvers.subsets`

- `generate_subsets(n)` lists every subset of `{0, …, n-1}` that has at least
  two elements and is not the whole set, in bitmask order, each subset in
  ascending order. This suits subtour-elimination constraints in integer
  programming models. A negative `n` raises `ValueError`.

### `graphsolvers.solver`

- `solve_problem(vertices, edges, rng=None)` prints `Solving...`, picks up to
  three distinct edges at random and returns their `(u, v)` endpoints in the
  order the edges appear in `edges`. `vertices` is accepted so that other
  solvers can share the same signature.

### `graphsolvers.visualization`

- `delaunay_triangles(points)` returns the Delaunay triangles of a point set as
  counter-clockwise triples of point indices (empty for fewer than three points).
- `render_svg(points, output_edges)` returns the SVG document as a string:
  grey Delaunay edges, red selected edges and blue vertices, scaled by 25 with
  a 50-unit margin and flipped so that y grows upwards. It returns an empty
  string for no points and raises `IndexError` if an edge names a missing vertex.
- `draw_svg(points, output_edges, filename="visualization.svg")` writes that
  document, prints where it was written and returns the `Path`; with no points
  it writes nothing and returns `None`.

### `graphsolvers.cli`

- `complete_graph(vertices)` returns every edge `i < j`, weighted by distance.
- `main(argv=None)` is the command described above.

## What it does not do

`solve_problem` does not optimise anything: it picks edges at random and is
meant to be replaced with a real model, such as a minimum spanning tree or a
tour. The package has no integer-programming or linear-programming solver of
its own and does not connect to one; `generate_subsets` only provides the
subsets such a model would constrain.