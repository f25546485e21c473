# ursa

A small OpenGL rendering demo. It opens a 640×640 window titled
"Ursa Engine!" and draws a quad with two textures. The quad spins around the
Z axis as time passes. Press **Escape** to close the window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
ursa [RESOURCES]
```

`RESOURCES` is the directory that holds the images and shaders. It defaults to
`resource`, relative to the current directory. These files are expected:

```
RESOURCES/images/Container.jpg
RESOURCES/images/Tag.png
RESOURCES/shaders/VertexSample.vert
RESOURCES/shaders/FragmentSample.frag
```

The shaders are given the following inputs:

- The vertex shader receives the position at attribute location 0.
- It receives the colour at location 1.
- It receives the texture coordinates at location 2.
- It receives a `mat4` uniform named `transform`.
- The fragment shader receives the two textures as the sampler uniforms `tex0`
  (unit 0) and `tex1` (unit 1).

The window asks for an OpenGL 3.3 forward-compatible context.

The command returns one of these exit statuses:

- `0` when the window is closed normally.
- `-1` when Escape is pressed.
- `-1` when no window can be created.
- `-1` when a shader fails to compile or link.
- `-1` when OpenGL reports an error.

If an image cannot be loaded, an error is logged and rendering goes on with an
empty texture.

## Library use

### `ursa.log`

- `setup(level)` adds a console handler to the `URSA` logger and sets its
  level. The handler writes to standard error as
  `[ HH:MM:SS ]--[ L ]--[ URSA ]: message`. On a terminal the level letter is
  coloured. Calling `setup` more than once does not add a second handler.
- `get_logger()` returns the logger.
- The levels are `TRACE`, `DEBUG`, `INFO`, `WARN`, `ERROR` and `CRITICAL`.
  `TRACE` is 5.

### `ursa.shader`

- `Shader(vertex_path, fragment_path)` reads, compiles and links a GLSL
  program. It needs a current OpenGL context.
  - Compile and link failures are logged, then raised as `ShaderError`.
  - The program id is available as `.id`.
  - `use()` and `unuse()` make the program current or clear it.
  - `set_bool(name, value)`, `set_int(name, value)` and
    `set_float(name, value)` set uniforms.
- `read_shader_sources(vertex_path, fragment_path)` returns both files' text.
  If either file cannot be read, it logs an error and returns two empty
  strings.
- `format_compile_error(path, error_log)` builds the report that is logged
  when compiling fails. `format_link_error(error_log)` builds the report that
  is logged when linking fails.

### `ursa.app`

- `load_image(path, channels)` returns `(width, height, data)`. The data is
  tightly packed pixels with the bottom row first. `channels` may be 1 to 4.
  - It raises `ValueError` for any other channel count.
  - It raises `OSError` if the file cannot be read or decoded.
- `rotation_z(angle)` returns a column-major 4×4 matrix as a 16-tuple. The
  matrix rotates by `angle` radians about the Z axis.
- `main(argv=None)` is the entry point of the `ursa` command. It returns the
  exit status.

## What it does not do

This is a single fixed demo scene, not a general engine:

- It has no scene description, models or camera.
- It ships no images or shaders. You supply the resource files listed above.