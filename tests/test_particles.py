import pytest

from tensixviz.particles import LayerKind, MemoryLayer, MemoryParticle


def test_memory_particle_creation():
    particle = MemoryParticle.spawn(0, 50.0, 45.0, 75.0)
    assert particle.layer == MemoryLayer(LayerKind.DDR, 0)
    assert particle.velocity > 0.0
    assert 0.0 < particle.intensity <= 1.0
    assert particle.ttl == 60
    assert particle.is_active()


def test_spawn_values():
    particle = MemoryParticle.spawn(3, 50.0, 0.0, 75.0)
    assert particle.layer == MemoryLayer(LayerKind.DDR, 3)
    assert particle.target_layer == MemoryLayer(LayerKind.L2, 0)
    assert particle.velocity == pytest.approx(1.25)
    assert particle.intensity == pytest.approx(0.75)
    assert particle.color_hue == pytest.approx(180.0)
    assert (particle.x, particle.y) == (0.0, 0.0)


def test_spawn_clamps_intensity_and_velocity():
    particle = MemoryParticle.spawn(0, 500.0, 100.0, 500.0)
    assert particle.intensity == 1.0
    assert particle.velocity == pytest.approx(2.0)
    assert particle.color_hue == pytest.approx(0.0)
    assert MemoryParticle.spawn(0, 0.0, 30.0, -10.0).intensity == 0.0


def test_particle_movement():
    particle = MemoryParticle.spawn(0, 50.0, 45.0, 75.0)
    initial_x = particle.x
    particle.update(50.0, 10)
    assert particle.x > initial_x
    assert particle.ttl == 59


def test_movement_uses_new_current():
    particle = MemoryParticle.spawn(0, 0.0, 45.0, 75.0)
    particle.update(100.0, 1)
    assert particle.velocity == pytest.approx(2.0)
    assert particle.x == pytest.approx(2.0)
    assert particle.y == pytest.approx(1.0)


def test_particle_lifecycle():
    particle = MemoryParticle.spawn(0, 50.0, 45.0, 75.0)
    particle.ttl = 1
    particle.update(50.0, 10)
    assert particle.ttl == 0
    assert not particle.is_active()


def test_ttl_does_not_go_negative():
    particle = MemoryParticle.spawn(0, 50.0, 45.0, 75.0)
    particle.ttl = 0
    particle.update(50.0, 10)
    assert particle.ttl == 0


def test_layer_advancement():
    particle = MemoryParticle.spawn(1, 100.0, 45.0, 75.0)
    for _ in range(5):
        particle.update(100.0, 0)
    assert particle.layer == MemoryLayer(LayerKind.L2, 0)
    assert particle.target_layer == MemoryLayer(LayerKind.L1, row=0, col=0)
    assert particle.x == 0.0

    for _ in range(5):
        particle.update(100.0, 0)
    assert particle.layer.kind is LayerKind.L1
    assert particle.target_layer == MemoryLayer(LayerKind.TENSIX, 0)

    for _ in range(10):
        particle.update(100.0, 0)
    assert particle.layer.kind is LayerKind.TENSIX
    assert particle.target_layer == MemoryLayer(LayerKind.TENSIX, 0)


def test_particle_character_intensity():
    low = MemoryParticle(velocity=1.0, intensity=0.0, color_hue=180.0)
    high = MemoryParticle(velocity=1.0, intensity=1.0, color_hue=180.0)
    assert low.get_char() == "·"
    assert high.get_char() == "✦"


def test_character_clamps_out_of_range_intensity():
    assert MemoryParticle(intensity=5.0).get_char() == "✦"
    assert MemoryParticle(intensity=-1.0).get_char() == "·"


def test_color_follows_hue():
    red = MemoryParticle(intensity=1.0, color_hue=0.0).get_color()
    assert red.r == 255
    assert red.g == red.b
    assert red.g < 60

    cyan = MemoryParticle(intensity=1.0, color_hue=180.0).get_color()
    assert cyan.g == cyan.b
    assert cyan.g > 250
    assert cyan.r < 60