#!/usr/bin/env python3
"""
Vithi scope: the same engine drawn with matplotlib instead of an arcade window.

Hotkeys:
  T          : trigger citta vithi
  SPACE      : pause / resume
  LEFT/RIGHT : speed down / up
  Q / ESC    : quit
"""
import argparse
import time

import numpy as np
import matplotlib.pyplot as plt

from .config import SimConfig, cfg
from .engine import Engine
from .sim.speed import snap_control


class VithiScope:
    def __init__(self, engine: Engine, update_hz=60.0):
        self.engine = engine
        self.dt_update = 1.0 / float(update_hz)
        self.control = engine.control_value
        self.running = True

        plt.ion()
        self.fig = plt.figure(figsize=(10, 5))
        self.ax = self.fig.add_subplot(1, 1, 1)
        self.line_bhavanga, = self.ax.plot([], [], lw=cfg.render.line_width, color=cfg.render.bhavanga_color)
        self.line_vithi, = self.ax.plot([], [], lw=cfg.render.line_width, color=cfg.render.vithi_color)
        self.ax.set_ylim(*cfg.render.y_domain)
        self.ax.set_xlabel("Time")
        self.ax.set_ylabel("Mental state")
        self.ax.set_title(cfg.render.title)
        self.ax.grid(True, linestyle="--")

        self.text_status = self.ax.text(0.99, 0.05, "", transform=self.ax.transAxes,
                                        ha='right', va='bottom', fontsize=10,
                                        bbox=dict(boxstyle="round,pad=0.3", fc="w", ec="0.7", alpha=0.8))

        self.fig.canvas.mpl_connect('key_press_event', self.on_key)

    def on_key(self, ev):
        if ev.key in ('q', 'escape'):
            self.running = False
        elif ev.key == 't':
            self.engine.trigger_episode()
        elif ev.key == ' ':
            self.engine.toggle_running()
        elif ev.key in ('left', 'right'):
            c = cfg.control
            step = c.control_step if ev.key == 'right' else -c.control_step
            self.control = snap_control(self.control + step, c.control_min, c.control_max, c.control_step)
            self.engine.set_speed(self.control)

    def update_once(self):
        self.engine.tick(time.perf_counter() * 1000.0)
        seq, values, members = self.engine.buffer.arrays()
        if len(seq) == 0:
            return False
        self.line_bhavanga.set_data(seq, values)
        # NaN breaks the overlay line outside episodes
        self.line_vithi.set_data(seq, np.where(members, values, np.nan))
        self.ax.set_xlim(seq[0], max(seq[-1], seq[0] + 1))

        state = "running" if self.engine.running else "paused"
        self.text_status.set_text(f"Speed {self.engine.speed_label} | {state}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        return True

    def run(self):
        while self.running and plt.fignum_exists(self.fig.number):
            t0 = time.time()
            self.update_once()
            dt = time.time() - t0
            plt.pause(max(0.001, self.dt_update - dt))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument('--speed', type=float, default=cfg.sim.initial_control, help="Initial slider position, 0..7")
    ap.add_argument('--seed', type=int, default=None, help="Seed for the background noise")
    ap.add_argument('--update-hz', type=float, default=60.0, help="UI update rate (Hz)")
    ap.add_argument('--verbose', action='store_true', default=False)
    args = ap.parse_args()

    sim = SimConfig.model_validate({**cfg.sim.model_dump(), "initial_control": args.speed, "verbose": args.verbose})
    engine = Engine(sim, rng=np.random.default_rng(args.seed))
    print(f"[Scope] Starting at {engine.speed_label}")
    VithiScope(engine, update_hz=args.update_hz).run()


if __name__ == "__main__":
    main()
