#!/usr/bin/env python3
# Render a freshly generated level to PNG using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from coinmaze.config import DIFFICULTY_ORDER, GameOptions, get_preset
from coinmaze.engine.state import GameState
from coinmaze.render.layers import compose_view
from coinmaze.render.palette import GRID_LINE, MARKER, fallback_color
from coinmaze.rng import PMRandom

def render_view(view, out_png, tile_size=16, margin=0):
    rows, cols = len(view), len(view[0])
    w, h = cols * tile_size + 2*margin, rows * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    q = max(1, tile_size // 4)
    for r in range(rows):
        for c in range(cols):
            tid = view[r][c]
            x0 = margin + c * tile_size
            y0 = margin + r * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=fallback_color(tid), outline=GRID_LINE)
            m = MARKER.get(tid)
            if m is not None:
                draw.ellipse((x0 + q, y0 + q, x0 + tile_size - q, y0 + tile_size - q), fill=m)
    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--difficulty", choices=DIFFICULTY_ORDER, default="easy")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--traps", action="store_true")
    ap.add_argument("--adversaries", action="store_true")
    ap.add_argument("--out", type=str, default="out/png/maze.png", help="PNG to write")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    rng = PMRandom(args.seed) if args.seed is not None else PMRandom.from_entropy()
    options = GameOptions(traps_enabled=args.traps, adversaries_enabled=args.adversaries)
    state = GameState.new(get_preset(args.difficulty), options, rng)
    render_view(compose_view(state), args.out, tile_size=args.tile)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
