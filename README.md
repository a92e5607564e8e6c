# enginecore

The core layer of a small 3D engine in plain Python, with no dependencies
outside the standard library.

## What is in it

- `enginecore.mathutil` has scalar helpers: `clamp`, `lerp`, `square`, `inv_sqrt`,
  `radians_to_degrees` and `degrees_to_radians`, and the constants `PI`,
  `SMALL_NUMBER` and `KINDA_SMALL_NUMBER`.
- `enginecore.vector` has `Vector`, `Vector4`, `Vector2D`, `Point` and `Rect`.
- `enginecore.quat` has `Quat`, with Euler, axis-angle and rotation-matrix conversions.
- `enginecore.matrix` has `Matrix`, a row-major 4x4 matrix for row vectors, with
  left-handed view (`look_at_lh`) and projection (`perspective_fov_lh`, `ortho_lh`)
  builders, inversion and decomposition.
- `enginecore.transform` has `Transform`, which holds position, rotation and scale.
- `enginecore.geometry` has `Ray` and `Box`, an axis-aligned box with ray intersection;
  `Box.intersect_ray` returns the hit distance or `None`.
- `enginecore.memory` has `MemoryTracker` (with a shared `platform_memory` instance),
  `ContainerAllocator`, `AllocationType`, `size_type_bounds` and the byte-buffer
  helpers `memmove`, `memcpy`, `memcmp`, `memset` and `memzero`.
- `enginecore.singleton` has `Singleton`, a base for lazily created single instances.
- `enginecore.uclass` has `UClass` and `Reflected`, for simple runtime class reflection.
- `enginecore.array`, `enginecore.hashmap` and `enginecore.hashset` have the containers
  `DynArray`, `HashMap` (with `Pair` and `make_pair`) and `HashSet`.
- `enginecore.delegate` has `Delegate`, a multicast callback list with handles.
- `enginecore.cstring` has the C-style comparisons `strcmp`, `strncmp`, `stricmp`,
  `strnicmp` and `strupr`; `enginecore.enginestring` has `EngineString` with
  `SearchCase` and `SearchDir`.

## Example

```python
from enginecore.vector import Vector
from enginecore.transform import Transform
from enginecore.geometry import Box, Ray

t = Transform()
t.translate(Vector(0.0, 0.0, 5.0))
print(t.forward())   # Vector(x=1.0, y=0.0, z=0.0)

box = Box(min_corner=Vector(-1, -1, -1), max_corner=Vector(1, 1, 1))
hit = box.intersect_ray(Ray(Vector(-5, 0, 0), Vector(1, 0, 0), 100.0))
print(hit)           # 4.0
```

## What it does not do

This is a library of building blocks only. It has no renderer, no window, no
keyboard or mouse input, no camera or player controller, and no command to run.

## Installation and tests

```
pip install .
pip install ".[test]"
pytest
```