"""
CLI entry point for the ripple field renderer.

Usage:
    ripplefield -o still.png [options]
    ripplefield -o loop.mp4 --duration 10 [options]
    python -m ripplefield [options]
"""

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from pathlib import Path

import numpy as np

from ripplefield.core.params import DEFAULT_PALETTE, FilmEffect, ParameterSet, ToneCurve
from ripplefield.io.encoder import VIDEO_SUFFIXES, encode_video
from ripplefield.io.exporter import save_png
from ripplefield.io.presets import PresetLibrary, display_name, preset_to_record
from ripplefield.randomize import randomize, randomize_colors_only, regenerate_twirl_seeds
from ripplefield.renderer import FieldRenderer, RenderConfig

PROFILES = {
    "low": {"width": 1280, "height": 720, "fps": 30, "quality": "fast"},
    "medium": {"width": 1920, "height": 1080, "fps": 60, "quality": "medium"},
    "high": {"width": 3840, "height": 2160, "fps": 60, "quality": "high"},
}

DEFAULT_OUTPUT = Path("ripplefield.png")


def _choice_names(enum_cls) -> list[str]:
    return [member.name.lower().replace("_", "-") for member in enum_cls]


def _from_choice(enum_cls, name: str) -> int:
    return int(enum_cls[name.upper().replace("-", "_")])


def _progress_bar(current: int, total: int, width: int = 35):
    """Print a progress bar to stdout."""
    pct = current / max(total, 1) * 100
    filled = int(width * current / max(total, 1))
    bar = "#" * filled + "-" * (width - filled)
    if sys.stdout.isatty():
        sys.stdout.write(f"\r[{bar}] {pct:5.1f}%  frame {current}/{total}")
        sys.stdout.flush()
        if current >= total:
            sys.stdout.write("\n")
    else:
        if current % max(1, total // 20) == 0 or current >= total:
            print(f"{pct:5.1f}%  frame {current}/{total}", flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ripplefield",
        description="Procedural animated gradient renderer",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output path: .png for a still, .mp4/.mov/.webm for video (default: ripplefield.png)",
    )

    # State
    parser.add_argument("--preset", type=str, default=None, help="Start from a named preset")
    parser.add_argument(
        "--preset-file", type=Path, default=None,
        help="JSON file of {name: preset} merged over the built-in presets",
    )
    parser.add_argument("--randomize", action="store_true", help="Randomize palette and wave parameters")
    parser.add_argument("--colors-only", action="store_true", help="Randomize the palette only")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")

    # Resolution & Profile
    parser.add_argument(
        "-p", "--profile", type=str, default="medium",
        choices=list(PROFILES),
        help="Target profile (low: 720p 30fps, medium: 1080p 60fps, high: 4k 60fps)",
    )
    parser.add_argument("--width", type=int, default=None, help="Frame width (overrides profile)")
    parser.add_argument("--height", type=int, default=None, help="Frame height (overrides profile)")
    parser.add_argument("-f", "--fps", type=int, default=None, help="Frames per second (overrides profile)")

    # Timing
    parser.add_argument(
        "--duration", type=float, default=10.0,
        help="Video length in seconds (default: 10)",
    )
    parser.add_argument(
        "--time", type=float, default=0.0,
        help="Seconds of animation before the first frame (default: 0)",
    )

    # Post-processing overrides
    parser.add_argument(
        "--effect", type=str, default=None,
        choices=_choice_names(FilmEffect),
        help="Override the active effect",
    )
    parser.add_argument(
        "--tone-curve", type=str, default=None,
        choices=_choice_names(ToneCurve),
        help="Override the tone curve used by the tone-mapping effect",
    )

    # Quality
    parser.add_argument(
        "-q", "--quality", type=str, default=None,
        choices=["high", "medium", "fast"],
        help="Encoding quality (defaults to profile quality)",
    )

    # Info
    parser.add_argument("--list-presets", action="store_true", help="List available presets and exit")
    parser.add_argument(
        "--dump-preset", action="store_true",
        help="Print the final state as a preset record (exits unless -o is given explicitly)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def resolve_state(args, library: PresetLibrary, rng: np.random.Generator):
    """Parameters and palette after preset, randomization and overrides."""
    params = regenerate_twirl_seeds(ParameterSet(), rng)
    palette = DEFAULT_PALETTE

    if args.preset:
        params, palette = library.load(args.preset, base=params)

    if args.colors_only:
        palette = randomize_colors_only(params, rng)
    elif args.randomize:
        params, palette = randomize(params, rng)

    if args.effect is not None:
        params = replace(params, film_effect=_from_choice(FilmEffect, args.effect))
    if args.tone_curve is not None:
        params = replace(params, tone_mapping_lut=_from_choice(ToneCurve, args.tone_curve))

    return params, palette


def run(args) -> int:
    library = PresetLibrary()
    if args.preset_file is not None:
        library.merge_file(args.preset_file)

    if args.list_presets:
        for name in library.names():
            print(f"{name:24s} {display_name(name)}")
        return 0

    rng = np.random.default_rng(args.seed)
    params, palette = resolve_state(args, library, rng)

    if args.dump_preset:
        print(json.dumps(preset_to_record(params, palette), indent=2))
        if args.output is None:
            return 0

    p_cfg = PROFILES[args.profile]
    width = args.width or p_cfg["width"]
    height = args.height or p_cfg["height"]
    fps = args.fps or p_cfg["fps"]
    quality = args.quality or p_cfg["quality"]

    if width <= 0 or height <= 0 or fps <= 0:
        raise ValueError(f"Invalid output size {width}x{height} @ {fps}fps")

    output = args.output or DEFAULT_OUTPUT
    suffix = output.suffix.lower()
    if suffix not in (".png",) + VIDEO_SUFFIXES:
        raise ValueError(f"Unsupported output type {suffix!r} (use .png, .mp4, .mov or .webm)")

    config = RenderConfig(width=width, height=height, fps=fps, time_offset=args.time)
    renderer = FieldRenderer(params, palette, config)

    print(f"Palette: {', '.join(palette.corners)}")
    print(f"  Waves: {params.wave_count}, zoom {params.wave_zoom}, speed {params.wave_speed}")

    t0 = time.time()

    if suffix == ".png":
        print(f"\nRendering still at {width}x{height}, t={args.time:.2f}s")
        save_png(renderer.render_frame(0), output)
        print(f"  Render took {time.time() - t0:.1f}s")
        print(f"  Output: {output}")
        return 0

    if args.duration <= 0:
        raise ValueError(f"Duration must be positive, got {args.duration}")

    total_frames = max(1, int(round(args.duration * fps)))
    print(f"\nRendering {total_frames} frames at {width}x{height} @ {fps}fps")
    print(f"  Profile: {args.profile}, Quality: {quality}")

    encode_video(
        frame_iterator=renderer.render_frames(total_frames, progress_callback=_progress_bar),
        output_path=output,
        width=width,
        height=height,
        fps=fps,
        quality=quality,
        total_frames=total_frames,
    )

    elapsed = time.time() - t0
    file_size_mb = output.stat().st_size / 1024 / 1024

    print(f"\nDone! {file_size_mb:.1f} MB")
    print(f"  Render+encode took {elapsed:.1f}s ({total_frames / max(elapsed, 0.01):.1f} fps)")
    print(f"  Output: {output}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        status = run(args)
    except KeyError as e:
        print(f"Error: {e.args[0] if e.args else e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
