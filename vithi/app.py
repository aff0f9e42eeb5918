#!/usr/bin/env python3
"""
Vithi visualizer: bhavanga (background) stream with triggerable citta-vithi bursts.

Controls:
  T        = trigger citta vithi (ignored while one is running)
  SPACE    = pause / resume
  LEFT/RIGHT = speed slider (0.1x .. 1Mx, half-decade steps)
  ESC      = quit

Run:
  pip install -e .
  vithi --speed 3
"""
import argparse
import time

import arcade
import numpy as np

from .config import SimConfig, cfg
from .engine import Engine
from .render.chart import hex_to_rgb
from .scenes.chart_scene import ChartScene
from .scenes.ui_scene import UIScene

class VithiApp(arcade.Window):
    def __init__(self, engine: Engine):
        super().__init__(
            width=cfg.render.width,
            height=cfg.render.height,
            title=cfg.render.title,
            antialiasing=True,
        )
        self.background_color = hex_to_rgb(cfg.render.background)
        self.engine = engine
        self.chart = ChartScene(self, engine)
        self.ui = UIScene(self, engine)

    def on_update(self, dt: float):
        # engine wants a wall-clock timestamp, not arcade's dt
        self.engine.tick(time.perf_counter() * 1000.0)
        self.chart.on_update(dt)
        self.ui.on_update(dt)

    def on_draw(self):
        self.clear()
        self.chart.on_draw()
        self.ui.on_draw()

    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            self.close()
            return
        self.chart.on_key_press(key, modifiers)
        self.ui.on_key_press(key, modifiers)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--speed", type=float, default=cfg.sim.initial_control,
                    help="Initial slider position, 0..7 (1 = real time)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the background noise")
    ap.add_argument("--width", type=int, default=cfg.render.width)
    ap.add_argument("--height", type=int, default=cfg.render.height)
    ap.add_argument("--verbose", action="store_true", default=False)
    args = ap.parse_args()

    cfg.render.width, cfg.render.height = args.width, args.height
    sim = SimConfig.model_validate({**cfg.sim.model_dump(), "initial_control": args.speed, "verbose": args.verbose})
    engine = Engine(sim, rng=np.random.default_rng(args.seed))
    print(f"[App] Starting at {engine.speed_label}, buffer {sim.max_points} pts")
    VithiApp(engine)
    arcade.run()
    print(f"[App] Closed after {engine.sim_time:0.1f} simulated s")

if __name__ == "__main__":
    main()
