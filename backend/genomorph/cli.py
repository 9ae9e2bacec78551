"""
Creature renderer — genome hex in, SVG (or PNG) out.

Usage:
  genomorph 0x010203                              # prints SVG to terminal
  genomorph 0x010203 --seed 0xabc1 -o c.svg       # saves SVG
  genomorph 0x010203 --level 5 --stage 2 -o c.png # saves PNG (needs cairo)
  genomorph 0x010203 --params                     # prints derived parameters
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from genomorph.config import settings
from genomorph.engine.decoder import MalformedHexError
from genomorph.engine.scene import generate_scene
from genomorph.svg.serializer import scene_to_svg


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a creature from its genome")
    parser.add_argument("genome", help="Genome hex string (0x prefix optional)")
    parser.add_argument("--seed", default=None, help="Seed hex, usually the object id")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--stage", type=int, default=0)
    parser.add_argument("--size", type=float, default=settings.default_size)
    parser.add_argument("--label", default=None, help="Caption drawn in the corner")
    parser.add_argument("-o", "--output", help="Output file (.svg or .png)")
    parser.add_argument("--params", action="store_true", help="Print derived parameters as JSON")
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")

    try:
        scene = generate_scene(
            args.genome,
            seed_hex=args.seed,
            level=args.level,
            stage=args.stage,
            size=args.size,
            label=args.label,
        )
    except MalformedHexError as e:
        print(f"Invalid genome: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Cannot render: {e}", file=sys.stderr)
        return 1

    if args.params:
        print(json.dumps(asdict(scene.parameters), indent=2))
        return 0

    svg = scene_to_svg(scene)
    if not args.output:
        print(svg)
        return 0

    if args.output.lower().endswith(".png"):
        from genomorph.svg.rasterizer import render_png

        with open(args.output, "wb") as f:
            f.write(render_png(svg, round(args.size)))
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
    print(f"Saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
