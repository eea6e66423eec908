# objplan

Path planning for a rigid object that moves in the plane and turns about the
z axis: every configuration is `(x, y, theta)`. The object is modelled as a
tree of bounding spheres built from its point cloud, and obstacles are given
as a plain point cloud. The planner grows an RRT* tree through the
configuration space and then shortens the path it finds by random
shortcutting.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

Build a sphere tree from the object's points, an `N x 3` array, and save it
to a file:

```python
import numpy as np
from objplan.planner import create_sphere_tree_file

object_points = np.random.default_rng(0).uniform(-0.05, 0.05, size=(200, 3))
create_sphere_tree_file(object_points, "object.tree")
```

Then create a `Planner` with the tree file, the obstacle points (also an
`N x 3` array) and the bounds of the configuration space, and plan from a
start to a goal:

```python
import math
import numpy as np
from objplan.geometry import Config
from objplan.planner import Planner
from objplan.rrt_star import PlanParams

obstacles = np.array([[0.5, 0.5, 0.0], [0.5, 0.6, 0.0]])
planner = Planner(
    "object.tree",
    obstacles,
    x_bounds=(0.0, 1.0),
    y_bounds=(0.0, 1.0),
    theta_bounds=(-math.pi, math.pi),
)

params = PlanParams(max_iterations=2000, step_size=0.1)
path = planner.plan(Config(0.1, 0.1, 0.0), Config(0.9, 0.9, 1.0), params, 100)
for waypoint in path:
    print(waypoint)

print(planner.is_config_in_collision(Config(0.5, 0.5, 0.0)))
```

`plan` returns a list of `Config` waypoints ending at the goal, or an empty
list when no path was found. `plan_params` defaults to `PlanParams()` and
`smoothing_iterations` to 100. Point arrays of any other shape than `N x 3`
raise `ValueError`.

### Parameters

`PlanParams` controls the search:

| field                        | default | meaning                                        |
|------------------------------|---------|------------------------------------------------|
| `max_iterations`             | 5000    | number of sampling iterations                  |
| `step_size`                  | 0.1     | largest extension of the tree in one step      |
| `goal_bias`                  | 0.1     | probability of sampling the goal directly      |
| `neighborhood_radius`        | 0.5     | radius for choosing parents and rewiring       |
| `collision_check_resolution` | 0.01    | spacing of checks along each tree edge         |

The distance between two configurations is
`sqrt(dx² + dy² + 0.1 · dθ²)`, with `dθ` taken the shorter way round the
circle (`objplan.geometry.config_distance`).

### Collision model

Only the leaf spheres of the object's tree are used. A configuration is in
collision when some obstacle point lies strictly inside a leaf sphere after
the object is rotated by `theta` about the z axis and moved by `(x, y)`.
With no leaf spheres or no obstacle points nothing collides.

### Repeatable runs

`RRTStarPlanner` and `PathSmoother` each take an optional `seed`; use them
directly with a `CollisionChecker` when runs must be repeatable. `Planner`
does not take a seed.

```python
from objplan.collision import CollisionChecker
from objplan.rrt_star import RRTStarPlanner
from objplan.smoothing import PathSmoother
from objplan.sphere_tree import load_sphere_tree

checker = CollisionChecker(load_sphere_tree("object.tree"), obstacles)
rrt = RRTStarPlanner(checker, Config(0.0, 0.0, -math.pi), Config(1.0, 1.0, math.pi), seed=1)
raw = rrt.plan(Config(0.1, 0.1, 0.0), Config(0.9, 0.9, 1.0), params)
path = PathSmoother(checker, seed=1).smooth(raw, 100)
```

### Sphere tree files

`save_sphere_tree` writes a little-endian unsigned 64-bit node count followed
by one 48-byte record per node: centre x, y, z and radius as doubles, then
parent, first child and second child ids as 32-bit integers and four padding
bytes. `load_sphere_tree` reads the same layout and raises `ValueError` on a
truncated file.

## Modules

- `objplan.geometry`: `Config`, `Sphere`, `SphereTreeNode`,
  `normalize_angle`, `config_distance` and `interpolate_segment`.
- `objplan.sphere_tree`: `principal_axis`, `bounding_sphere`,
  `build_sphere_tree`, `save_sphere_tree` and `load_sphere_tree`.
- `objplan.collision`: `CollisionChecker`, testing the leaf spheres against a
  k-d tree of obstacle points.
- `objplan.rrt_star`: `RRTStarPlanner`, `PlanParams`, `RRTNode` and `steer`.
- `objplan.smoothing`: `PathSmoother`, random shortcutting.
- `objplan.planner`: `Planner`, `as_points` and `create_sphere_tree_file`.

## What it does not do

The package is a library only: it has no command-line tool, and it does not
draw or otherwise display trees, obstacles or paths.