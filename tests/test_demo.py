"""
Headless smoke tests for the interactive window and the command line.

The Agg backend has no event loop, so the window's `show` is replaced by a
function that draws the canvas once and steps the animation by hand.
"""
import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.backend_bases import KeyEvent, MouseEvent  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from liquid_metal import __main__ as cli  # noqa: E402
from liquid_metal.config import SimulationConfig  # noqa: E402
from liquid_metal.demo import DemoWindow, run_demo  # noqa: E402


def drive(window, frames=3):
    window.figure.canvas.draw()
    for _ in range(frames):
        window.animation._step()


@pytest.fixture
def headless(monkeypatch):
    shown = []

    def fake_show(self):
        drive(self)
        shown.append(self)

    monkeypatch.setattr(DemoWindow, "show", fake_show)
    yield shown
    for window in shown:
        plt.close(window.figure)
    logger = logging.getLogger("liquid_metal")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_animation_steps_with_blitting(headless):
    window = run_demo(SimulationConfig(width=32, height=32))

    assert headless == [window]
    assert window.pipeline.frame_count >= 3
    assert window.status.axes is window.image.axes
    assert window.image.get_array().shape == (32, 32, 4)


def test_pointer_drag_reaches_the_field(headless):
    window = run_demo(SimulationConfig(width=32, height=32))
    canvas = window.figure.canvas
    width, height = window.canvas_size()
    assert not window.pipeline.field.heights.any()

    # Canvas y grows upwards; the middle of the window is the middle of the grid.
    press = MouseEvent("button_press_event", canvas, width / 2, height / 2, button=1)
    canvas.callbacks.process("button_press_event", press)
    assert window.pressed
    assert (window.pointer_x, window.pointer_y) == (width / 2, height / 2)

    drive(window, frames=1)
    heights = window.pipeline.field.heights
    assert heights.min() < 0
    assert heights[16, 16] == heights.min()

    release = MouseEvent("button_release_event", canvas, width / 2, height / 2, button=1)
    canvas.callbacks.process("button_release_event", release)
    assert not window.pressed

    before = heights.sum(dtype=np.float64)
    move = MouseEvent("motion_notify_event", canvas, width / 4, height / 4)
    canvas.callbacks.process("motion_notify_event", move)
    drive(window, frames=1)
    # No new impulse without the button held; the field only relaxes
    assert heights.sum(dtype=np.float64) == pytest.approx(before, abs=1e-3)
    assert window.pointer_y == height - height / 4


def test_fullscreen_key_is_handled(headless):
    window = run_demo(SimulationConfig(width=16, height=16))
    canvas = window.figure.canvas
    canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", canvas, "f"))
    assert plt.rcParams["keymap.fullscreen"] == []


def test_command_line_runs_the_demo(headless, tmp_path):
    log_file = tmp_path / "demo.log"
    config_file = tmp_path / "small.json"
    config_file.write_text('{"width": 24, "height": 20}')

    cli.main(["--log-level", "DEBUG", "--config", str(config_file),
              "--log-file", str(log_file)])

    (window,) = headless
    assert window.pipeline.field.heights.shape == (20, 24)
    assert window.pipeline.frame_count >= 3
    assert logging.getLogger("liquid_metal").level == logging.DEBUG
    for handler in logging.getLogger("liquid_metal").handlers:
        handler.flush()
    assert "Pipeline ready: 24x20 grid" in log_file.read_text(encoding="utf-8")
