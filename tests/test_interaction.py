from liquid_metal.interaction import StatusOverlay, pointer_to_cell

DISPLAY = (960, 540)
GRID = (200, 200)


def test_pointer_is_scaled_into_the_grid():
    assert pointer_to_cell(480, 270, DISPLAY, GRID) == (100, 100)
    assert pointer_to_cell(100.9, 53.9, DISPLAY, GRID) == (21, 19)


def test_pointer_near_edges_is_rejected():
    assert pointer_to_cell(0, 270, DISPLAY, GRID) is None
    # Column 1 is interior but still rejected
    assert pointer_to_cell(5, 270, DISPLAY, GRID) is None
    assert pointer_to_cell(959, 270, DISPLAY, GRID) is None
    assert pointer_to_cell(480, 539, DISPLAY, GRID) is None
    assert pointer_to_cell(-30, 270, DISPLAY, GRID) is None


def test_empty_display_is_rejected():
    assert pointer_to_cell(10, 10, (0, 0), GRID) is None


def test_overlay_fades_in_after_idle_period():
    overlay = StatusOverlay(idle_seconds=1.0, fade_step=5)

    assert overlay.update((10, 10), 0.5) == 0
    assert overlay.update((10, 10), 0.5) == 0
    assert overlay.update((10, 10), 0.5) == 5
    assert overlay.visible

    for _ in range(100):
        overlay.update((10, 10), 1 / 60)
    assert overlay.alpha == 255


def test_overlay_fades_out_on_movement():
    overlay = StatusOverlay(idle_seconds=0.1, fade_step=5)
    for _ in range(10):
        overlay.update((0, 0), 0.05)
    shown = overlay.alpha
    assert shown > 0

    assert overlay.update((1, 0), 0.05) == shown - 5
    assert overlay.idle_time == 0.0
    assert overlay.target_alpha == 0

    for i in range(200):
        overlay.update((i + 2, 0), 0.05)
    assert overlay.alpha == 0
    assert not overlay.visible
