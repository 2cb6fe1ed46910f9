# tensixviz

Building blocks for telemetry-driven terminal visualizations of accelerator
hardware. Each visual element is derived from measurements you pass in:
power, current, temperature and clock frequency.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tensixviz.baseline`: `DeviceBaseline` and `AdaptiveBaseline`. They average
  each device's first 20 samples into an idle baseline. After that they report
  readings as a change relative to it (0.1 is a 10% rise). Until the baseline
  is established, the change is 0.0. `AdaptiveBaseline.workload_detected`
  returns true when power or current is more than 20% above baseline.
  `max_activity` always returns 0.0.
- `tensixviz.common`: colour and glyph helpers. It has `Rgb`, `hsv_to_rgb`,
  `temp_to_hue`, `value_to_char_intensity` and the `value_to_block_char`,
  `value_to_window_char`, `value_to_singularity_char` and
  `value_to_portal_char` gradients. It also has `lerp`, `ease_in_out`,
  `wrap_phase`, the 16-colour `ANSI_PALETTE` with `ansi_color` and
  `ansi_color_cycle`, `arc_health_header`, `arc_health_color`, `lissajous`
  and `spirograph`.
- `tensixviz.color_scheme`: `ColorScheme`, with base and bright colours. The
  rainbow scheme cycles through the palette. `ColorScheme.random()` chooses a
  scheme from the wall clock.
- `tensixviz.castle_theme`: `CastleTheme.for_architecture`. It takes an
  architecture name, or any object with a `name`:
  - Grayskull gives `GREYSKULL`.
  - Wormhole gives `PORTAL_NEXUS`.
  - Blackhole gives `EVENT_HORIZON`.
  - Anything else gives `GREYSKULL`.
- `tensixviz.particles`: `MemoryParticle`, `MemoryLayer` and `LayerKind`. A
  particle moves from DDR to L2 to L1 to a Tensix core. Its speed comes from
  current, its glyph from power and its colour from temperature. It lives
  for 60 frames.
- `tensixviz.gates`: DDR training status. `parse_ddr_status` decodes a hex
  status word. `channel_status` extracts a channel's 4-bit state: 0
  untrained, 1 training, 2 trained, higher values an error.
  `flow_block_count` maps amps to a gauge of 0 to 8 blocks. `training_glyph`
  alternates `◐`/`◑` every three frames.
- `tensixviz.stars`, `tensixviz.planets`, `tensixviz.streams`: the glyphs of
  a starfield view:
  - `Star` is a Tensix core. Its glyph comes from brightness and depth, and
    it sparkles above 0.8.
  - `MemoryPlanet` is an L1, L2 or DDR bank.
  - `DataStream` is an arrow for traffic between devices.
- `tensixviz.flow`: `MemoryFlowParticle` and `FlowDirection`. Read particles
  travel from a DDR channel to a core. Write particles travel from a core to
  a DDR channel. Both move on a normalised 0..1 plane.

## Example

```python
from tensixviz.baseline import AdaptiveBaseline
from tensixviz.common import hsv_to_rgb, temp_to_hue, value_to_block_char

baseline = AdaptiveBaseline()
for _ in range(20):
    baseline.update(0, power=50.0, current=20.0, temp=30.0, aiclk=800.0)

print(baseline.is_established())                  # True
print(baseline.workload_detected(0, 65.0, 26.0))  # True: 30% above idle
print(value_to_block_char(0.5))                   # '▒'
print(hsv_to_rgb(temp_to_hue(100.0), 1.0, 1.0))   # Rgb(r=255, g=0, b=0)
```

## What it does not do

This is a library of pieces, not a monitor:

- It does not read telemetry from any device. You supply the numbers.
- It does not draw a screen or run an animation loop.
- It has no command to run.
- It has no box-drawing grid styles.