# rigsmith

Building blocks for editing vehicle rigs: 3D math in a Z-up coordinate
system, mesh data, primitive shapes, an incremental convex hull builder, and
a set of reactive project settings that can be saved to and loaded from JSON.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `rigsmith.vec3`: `Vec3`, an immutable vector with `+ - * /` against vectors
  or numbers, `length`, `normalized`, `dot`, `cross`, `triple`,
  `components_sum`, `parse` for three whitespace-separated numbers, and
  `to_gl` / `from_gl` for the Y-up renderer axis convention (`Vec3Type.SIZE`
  makes `to_gl` return absolute values).
- `rigsmith.angle`: `Angle`, stored in degrees, with `from_degrees`,
  `from_radians`, the `radians` property, arithmetic, comparisons and
  `normalized` (remainder modulo 360, keeping the sign).
- `rigsmith.rotor`: `Rotor3`, a rotation of `roll`, `pitch` and `yaw` angles,
  with `from_degrees`, `from_angles` (pitch, yaw, roll order), element-wise
  arithmetic with another `Rotor3` or an `Angle`, and `to_gl` / `from_gl`.
- `rigsmith.line`: `Line` with `length` and `distance_to_point`.
- `rigsmith.plane`: `Plane` with `distance_to_point`, `from_points` and
  `from_normal_and_point`.
- `rigsmith.matrix`: `Matrix`, indexable as `m[row][col]` or `m[row, col]`,
  with `zeros`, `identity`, products, sums, `transpose`, `determinant`,
  `minor`, `inverted` (a zero matrix when singular), and 4×4 helpers
  `translate`, `scale`, `rotate_axis`, `rotate_quaternion`, `apply`, `gl_mat`
  and `from_gl_mat`.
- `rigsmith.quaternion`: `Quaternion` with `x_axis`, `y_axis`, `z_axis`,
  `to_euler`, `from_euler`, `to_gl` and `from_gl`.
- `rigsmith.transforms`: `rotate(point, rotor)` and
  `quaternion_from_matrix(matrix)`.
- `rigsmith.model`: `Vertex` (position, UV and material index), `Face`,
  `Edge`, `Model` and `WireframeModel`.
- `rigsmith.hull`: `convex_hull(points)`, returning a `Model` with one empty
  material and three vertices per face. It needs at least four distinct
  points and raises `ValueError` for fewer or for degenerate input.
- `rigsmith.shapes`: the abstract `Shape` and the `Box`, `Sphere` (16
  segments) and `ConvexHull` shapes, each producing a `Model` from `model()`.
- `rigsmith.ranges`: `Range` and `RangeArray`, which keeps spans of values
  sorted and merges those that touch, later values winning.
- `rigsmith.callbacks`: `CallbackCollection`, callbacks added by id and called
  in order.
- `rigsmith.react`: `ReactValue`, a value whose `set` notifies its
  `callbacks` and whose `move` does not.
- `rigsmith.resources`: `ResourcesHolder`, a cache that returns the same
  object for a key while it is alive, and the shared `ResourceManager`.
- `rigsmith.inputs`: the state of editor controls: `BoneSelector`,
  `FloatInput` and `FilePicker`.
- `rigsmith.configuration`: `Configuration`, the settings of one vehicle
  project (mesh, collision, tire collision and engine sound paths, skin
  paths, wheel offsets and the steering wheel bone), with `from_json`,
  `to_json`, `save` and `load`.

## Examples

A convex hull:

```python
from rigsmith.hull import convex_hull
from rigsmith.vec3 import Vec3

points = [
    Vec3(0.0, 0.0, 0.0),
    Vec3(1.0, 0.0, 0.0),
    Vec3(0.0, 1.0, 0.0),
    Vec3(0.0, 0.0, 1.0),
    Vec3(1.0, 1.0, 1.0),
]
hull = convex_hull(points)
print(len(hull.faces))
```

Saving and restoring project settings:

```python
from rigsmith.configuration import Configuration

config = Configuration()
config.resize_texture_array(2)
config.set_texture(0, "body.dds")
config.save("project.json")

restored = Configuration()
restored.load("project.json")
print(restored.to_json()["skinsPath"])
```

Listening for changes:

```python
from rigsmith.configuration import Configuration

config = Configuration()
config.wheel_vert.react.callbacks.add(lambda value: print("height", value))
config.wheel_vert.submit(12.5)
```

## What it does not do

There is no editor window, no 3D viewer, no physics simulation and no sound
playback: the controls in `rigsmith.inputs` hold state and raise events but
draw nothing. There is also no reader for mesh files. To refresh the steering
wheel bone choices when a mesh is chosen, pass your own `bone_loader`, a
function from a mesh path to bone names, to `Configuration`.