"""
Interactive liquid metal window.

A matplotlib figure plays the part of the display surface: it forwards
pointer drags to the pipeline as impulses, shows each shaded frame scaled
to the window with nearest-neighbour sampling, and fades in a short help
bar while the pointer is idle. This module is the only one that imports
matplotlib.
"""
from __future__ import annotations

import logging
import time
from typing import Optional

from liquid_metal.config import SimulationConfig
from liquid_metal.interaction import StatusOverlay, pointer_to_cell
from liquid_metal.pipeline import LiquidMetalPipeline

logger = logging.getLogger(__name__)

BACKGROUND = (20 / 255, 40 / 255, 60 / 255)
HELP_TEXT = 'Click and drag your mouse. "F" toggles fullscreen.'
TITLE = "Liquid Metal"


class DemoWindow:
    """Figure, animation and pointer state for one running demo."""

    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        import matplotlib.pyplot as plt
        from matplotlib import animation

        self.config = config or SimulationConfig()
        self.pipeline = LiquidMetalPipeline(self.config)
        self.overlay = StatusOverlay(self.config.idle_seconds, self.config.fade_step)

        # "f" is handled in on_key; keep matplotlib from toggling a second time.
        plt.rcParams["keymap.fullscreen"] = []

        dpi = 100
        self.figure = plt.figure(
            figsize=(self.config.window_width / dpi, self.config.window_height / dpi),
            dpi=dpi, facecolor=BACKGROUND)
        if self.figure.canvas.manager is not None:
            self.figure.canvas.manager.set_window_title(TITLE)
        ax = self.figure.add_axes([0, 0, 1, 1])
        ax.set_axis_off()
        ax.set_facecolor(BACKGROUND)

        self.image = ax.imshow(self.pipeline.shade(), interpolation="nearest",
                               aspect="auto", animated=True)
        # Blitted artists must belong to the axes.
        self.status = ax.text(
            0.01, 0.01, HELP_TEXT, transform=ax.transAxes, color="white",
            fontsize=11, alpha=0.0, animated=True,
            bbox={"facecolor": (50 / 255, 50 / 255, 50 / 255),
                  "edgecolor": (0.7, 0.7, 0.7), "alpha": 0.0},
        )

        # Physical canvas pixels with a top-left origin, like the grid.
        self.pointer_x = 0.0
        self.pointer_y = 0.0
        self.pressed = False
        self._last_time = time.perf_counter()

        canvas = self.figure.canvas
        canvas.mpl_connect("motion_notify_event", self.on_move)
        canvas.mpl_connect("button_press_event", self.on_press)
        canvas.mpl_connect("button_release_event", self.on_release)
        canvas.mpl_connect("key_press_event", self.on_key)

        self.animation = animation.FuncAnimation(
            self.figure, self.update, interval=1000 / self.config.target_fps,
            blit=True, cache_frame_data=False,
        )

    def canvas_size(self):
        return self.figure.canvas.get_width_height(physical=True)

    def on_move(self, event) -> None:
        _, canvas_h = self.canvas_size()
        self.pointer_x = event.x
        self.pointer_y = canvas_h - event.y

    def on_press(self, event) -> None:
        if event.button == 1:
            self.pressed = True
            self.on_move(event)

    def on_release(self, event) -> None:
        if event.button == 1:
            self.pressed = False

    def on_key(self, event) -> None:
        if event.key == "f" and self.figure.canvas.manager is not None:
            self.figure.canvas.manager.full_screen_toggle()
            logger.info("Toggled fullscreen")

    def update(self, frame_index: int) -> list:
        now = time.perf_counter()
        frame_time = now - self._last_time
        self._last_time = now

        alpha = self.overlay.update((self.pointer_x, self.pointer_y), frame_time) / 255
        self.status.set_alpha(alpha)
        self.status.get_bbox_patch().set_alpha(alpha)

        impulse = None
        if self.pressed:
            cell = pointer_to_cell(self.pointer_x, self.pointer_y, self.canvas_size(),
                                   (self.config.width, self.config.height))
            if cell is not None:
                impulse = self.pipeline.pointer_impulse(*cell)

        self.image.set_data(self.pipeline.frame(impulse))
        return [self.image, self.status]

    def show(self) -> None:
        import matplotlib.pyplot as plt

        logger.info("Window open; close it to quit.")
        plt.show()
        logger.info("Window closed after %d frames.", self.pipeline.frame_count)


def run_demo(config: Optional[SimulationConfig] = None) -> DemoWindow:
    """Open the window and run until it is closed."""
    window = DemoWindow(config)
    window.show()
    return window
