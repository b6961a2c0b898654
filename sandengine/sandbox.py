"""Demo scene: a fly camera around a textured model inside a skybox."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from .renderer import Renderer, create_gl_context, create_mesh
from .window import Window


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="sandbox", description=__doc__)
    parser.add_argument("--res", default="res", help="resource directory")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    res = Path(args.res)

    win = Window(1280, 720, "Sandbox", True)
    try:
        win.show_cursor(False)
        create_gl_context(win, True)

        renderer = Renderer(win)
        renderer.cam.speed = 2.5

        skybox = create_mesh(res / "sky.obj", res / "skybox.png")
        skybox.scale = np.array([0.5, 0.5, 0.5])

        backpack = create_mesh(res / "backpack" / "backpack.obj", res / "backpack" / "texture.jpeg")
        backpack.scale = np.array([0.01, 0.01, 0.01])
        backpack.pos = np.zeros(3)

        last_frame = 0.0
        while not win.should_close():
            current = win.get_time()
            dt = current - last_frame
            last_frame = current

            renderer.cam.fly_controller(dt, win)

            win.poll_events()
            win.handle_resize()
            win.clear()

            renderer.begin()
            skybox.pos = renderer.cam.pos.copy()
            renderer.draw_mesh(skybox)
            renderer.draw_mesh(backpack)
            renderer.end()

            win.swap_buffers()
    finally:
        win.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())