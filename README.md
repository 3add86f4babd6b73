# raytrace

A small ray tracer in plain Python. It covers:

- points, vectors and colours as `Vec4` (`raytrace.tuples`)
- 2x2, 3x3 and 4x4 matrices with determinants and inversion, and the
  transforms `translation`, `scaling`, `rotation_x`, `rotation_y`,
  `rotation_z`, `shearing` and `view_transform` (`raytrace.matrices`)
- rays (`raytrace.ray`)
- spheres and planes, and `glass_sphere()` (`raytrace.shape`)
- intersections, `hit()` and precomputed shading values with Schlick's
  approximation (`raytrace.intersection`)
- materials (`raytrace.material`)
- Phong lighting from a point light (`raytrace.light`)
- a world with shadows, reflection and refraction (`raytrace.world`)
- striped, gradient, ring, checker and image texture patterns
  (`raytrace.patterns`)
- a camera that renders a world onto a canvas, written out as plain PPM
  (`raytrace.camera`, `raytrace.canvas`)
- ready-made demonstration scenes (`raytrace.scenes`)

## Installation

```
pip install .
```

With the test extra:

```
pip install ".[test]"
pytest
```

## Rendering a scene

```
raytrace [scene] [--texture PATH]
```

`scene` is one of:

| scene          | output file                         | what it draws                                   |
|----------------|-------------------------------------|-------------------------------------------------|
| `scene`        | `scene.ppm` (default)               | three reflective spheres on a checkered floor   |
| `sphere`       | `sphere.ppm`                        | a single shaded red sphere                      |
| `clock`        | `clock.ppm`                         | the twelve hour marks of a clock face           |
| `tick`         | `tick.ppm`                          | the flight path of a projectile                 |
| `checkerboard` | `sphere_on_checkerboard.ppm`        | a textured sphere on a textured floor           |

The file is written into an `output` directory under the current working
directory, which the command creates if needed. `scene` and `checkerboard`
print a progress bar while rendering.

The `checkerboard` scene reads an image for its textures; `--texture` gives its
path and defaults to `santaclaus100x100.png` in the current directory. No such
image is shipped with the package, so supply your own.

## Using the library

```python
from raytrace.camera import Camera
from raytrace.matrices import view_transform
from raytrace.tuples import point, vector
from raytrace.world import World

world = World()  # the default world: two concentric spheres and one light
camera = Camera(300, 150, 60.0)
camera.transform = view_transform(
    point(0.0, 1.5, -5.0),
    point(0.0, 0.0, 0.0),
    vector(0.0, 1.0, 0.0),
)

canvas = camera.render(world, 3)  # up to three reflection/refraction bounces
ppm_text = canvas.to_ppm()
```

Matrices multiply each other and `Vec4` values with `@`, for example
`translation(5.0, -3.0, 2.0) @ point(-3.0, 4.0, 5.0)`. Transforms chain with
`Matrix4x4.translate`, `scale`, `rotate_x`, `rotate_y`, `rotate_z` and `shear`.

`Canvas.write_to_ppm(name)` saves the image as `output/<name>`; the `output`
directory must already exist. In the PPM text each pixel's third value repeats
its green channel rather than its blue one.

`TexturePattern.from_file(path, scale_x, scale_y, offset_x, z_oriented, flipped)`
loads an image with Pillow and raises `FileNotFoundError` if it cannot be read.

## What it does not do

- It writes PPM text only; it has no window or viewer and saves no other image
  formats.
- The only shapes are spheres and the xz plane, lit by a single point light.
- Rendering is single-threaded pure Python and is slow for large images.