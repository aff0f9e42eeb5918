
import arcade
from ..config import cfg
from ..render.chart import hex_to_rgb
from ..sim.speed import snap_control, to_speed, format_speed

class UIScene:
    """HUD plus the keyboard stand-ins for the trigger button, pause toggle and speed slider."""
    def __init__(self, window, engine):
        self.window = window
        self.engine = engine
        self.control = engine.control_value

    def on_update(self, dt: float):
        pass

    def on_draw(self):
        w, h = self.window.width, self.window.height
        arcade.draw_lrbt_rectangle_filled(0, w, 0, 110, (0, 0, 0, 140))
        arcade.draw_text("Bhavanga citta (grey) - continuous life-continuum", 20, 80,
                         hex_to_rgb(cfg.render.bhavanga_color), 13)
        arcade.draw_text("Citta vithi (red) - cognitive process", 20, 58,
                         hex_to_rgb(cfg.render.vithi_color), 13)
        state = "running" if self.engine.running else "paused"
        vithi = "vithi active" if self.engine.episode_active else "[T] trigger vithi"
        arcade.draw_text(f"Speed {self.engine.speed_label}   {state}   {vithi}", 20, 24,
                         arcade.color.WHITE, 14)
        arcade.draw_text(self._slider_text(), w - 360, 24, arcade.color.WHITE, 12)
        arcade.draw_text(cfg.render.title, 20, h - 34, arcade.color.WHITE, 18)

    def _slider_text(self):
        c = cfg.control
        marks = "  ".join(label for _, label in c.marks)
        return f"[<-/->] {format_speed(to_speed(self.control))}   ({marks})"

    def nudge_speed(self, direction: int):
        c = cfg.control
        self.control = snap_control(self.control + direction * c.control_step,
                                    c.control_min, c.control_max, c.control_step)
        self.engine.set_speed(self.control)

    def on_key_press(self, key, modifiers):
        if key == arcade.key.T:
            self.engine.trigger_episode()
        elif key == arcade.key.SPACE:
            self.engine.toggle_running()
        elif key == arcade.key.RIGHT:
            self.nudge_speed(+1)
        elif key == arcade.key.LEFT:
            self.nudge_speed(-1)
