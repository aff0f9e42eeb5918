
import arcade
from ..config import cfg
from ..render.chart import ChartRect, episode_segments, grid_lines, hex_to_rgb, to_screen_points

class ChartScene:
    def __init__(self, window, engine):
        self.window = window
        self.engine = engine
        left, right, bottom, top = cfg.render.margin_px
        self.rect = ChartRect(left, bottom, window.width - left - right, window.height - bottom - top)
        self.grid_color = hex_to_rgb(cfg.render.grid_color)
        self.bhavanga_color = hex_to_rgb(cfg.render.bhavanga_color)
        self.vithi_color = hex_to_rgb(cfg.render.vithi_color)

    def on_update(self, dt: float):
        pass

    def on_draw(self):
        r = self.rect
        ys, xs = grid_lines(r, cfg.render.y_domain)
        for y in ys:
            arcade.draw_line(r.left, y, r.left + r.width, y, self.grid_color, 1)
        for x in xs:
            arcade.draw_line(x, r.bottom, x, r.bottom + r.height, self.grid_color, 1)

        seq, values, members = self.engine.buffer.arrays()
        if len(seq) < 2:
            return
        pts = to_screen_points(seq, values, r, cfg.render.y_domain)
        lw = cfg.render.line_width
        arcade.draw_line_strip([tuple(p) for p in pts], self.bhavanga_color, lw)
        # episode overlay on top of the full trace
        for run in episode_segments(pts, members):
            arcade.draw_line_strip([tuple(p) for p in run], self.vithi_color, lw)

    def on_key_press(self, key, modifiers):
        pass
