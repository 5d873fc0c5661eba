# spritekit

A small 2D sprite renderer built around instanced drawing. It keeps sprites
in compact, handle-addressed buffers. It uploads their attributes to the GPU
in one batch. It then draws every sprite of a buffer with a single instanced
call.

## What is inside

- `spritekit.clock` has `Clock` and `ClockSettings`. They provide:
  - frame delta time and elapsed time from a time source you pass in;
  - an FPS counter, updated once a second;
  - a 16-bit tick counter (`tick`) that wraps around;
  - an optional frame-rate cap (`set_target_fps`, `wait_for_frame_end`).
- `spritekit.sprites` has `StaticSpriteBuffer`, `AnimatedSpriteBuffer` and
  `SpriteInstance`. These are fixed-capacity sprite stores with stable handles:
  - `create()` raises `IndexError` when the buffer is full.
  - Removing a sprite moves the last sprite into its slot, so the data stays
    packed.
  - The freed handle is reused by the next `create()`.
  - Unknown handles raise `KeyError`.
  - Animated sprites cycle through a range of atlas frames at their own tick
    rate (`set_animation`, `update_animations`).
- `spritekit.shader` compiles and links a vertex and a fragment shader:
  - `Shader.from_files` and `Shader.from_source` do the work, and raise
    `ShaderError` when compiling or linking fails.
  - The `set_uniform_*` methods set uniforms by name.
  - `read_text_file` reads a shader source file.
- `spritekit.texture` has `Texture.load`, which reads an image through Pillow.
  The image is converted to RGBA and flipped vertically. The texture is
  uploaded with nearest-neighbour filtering and clamped edges, and can be
  bound to a texture slot. `load_image` returns the raw pixels without
  touching OpenGL.
- `spritekit.atlas` has `TextureAtlas`, which splits a texture into
  fixed-size tiles:
  - It binds the texture to one of 16 shader slots.
  - It sets `u_textures[slot]` and `u_atlas_info[slot]`; the latter holds the
    atlas size followed by the tile size.
  - `count_tiles` gives the number of whole tiles that fit.
- `spritekit.gpu_batch` has `SpriteBatch` and `BatchRenderer`:
  - They hold the vertex arrays and per-instance buffers that feed the sprite
    buffers to the GPU.
  - `pack_attributes` packs a buffer's sprites into one byte string per
    attribute.
- `spritekit.renderer` has `Renderer`. It owns a static and an animated
  sprite buffer with their batches, and sets up alpha blending. It can also
  create and draw a coloured debug triangle.
- `spritekit.platform` has `Platform`, which manages:
  - an OpenGL 3.3 window through pyglet;
  - event polling and buffer swapping;
  - vsync;
  - keyboard state and a time source.

  Set-up failures raise `PlatformError`.
- `spritekit.game` is the demo scene:
  - 99 small sprites are placed at start-up.
  - W, A, S and D move the model matrix.
  - A line with FPS and sprite counts is printed about once a second
    (`FpsReporter`).
- `spritekit.app` is the main loop that ties everything together, and the
  `spritekit` command.

## Installing

```
pip install .
```

An OpenGL 3.3 capable display is needed to open a window.

## Running the demo

```
spritekit
```

The window title and size can be changed:

```
spritekit --title Demo --width 800 --height 600
```

The demo loads its assets relative to the working directory:

```
assets/shader/sprite.vert
assets/shader/sprite.frag
assets/sprites/debug.png
```

If a shader fails to compile or link, or the window cannot be created, the
command prints the error and exits with status 1.

## Using the sprite buffers

```python
from spritekit.sprites import AnimatedSpriteBuffer

sprites = AnimatedSpriteBuffer(100)
handle = sprites.create()
sprite = sprites.instance(handle)
sprite.scale = (0.1, 0.1)
sprites.set_animation(handle, first_frame=0, frame_span=10, tick_rate=4)

for tick in range(16):
    sprites.update_animations(tick)

print(sprites.instance(handle).uv_index)
```

## What it does not do

- The package does not ship the demo's shaders or spritesheet. The `spritekit`
  command needs them in `assets/` as listed above.
- The demo loop does not advance sprite animations. It also does not call
  `Clock.tick` or apply a frame-rate cap. Those parts are only available
  through the library.
- There is no audio, no scene format and no way to add or remove sprites from
  the keyboard.

## Running the tests

```
pip install .[test]
pytest
```