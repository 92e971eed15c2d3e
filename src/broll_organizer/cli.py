"""
CLI entrypoint:
  broll-organizer resolve script.txt [-o scenes.json] [--provider envato]
  broll-organizer retry scenes.json 3 "city skyline" [-o scenes.json]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from broll_organizer.adapters import default_adapters
from broll_organizer.application.pipeline import FootagePipeline
from broll_organizer.config import PROVIDERS, AppConfig
from broll_organizer.domain.errors import BrollError
from broll_organizer.domain.models import ResolvedSegment
from broll_organizer.serialization import load_segments, save_segments


def print_scenes(scenes: List[ResolvedSegment], start: int = 1) -> None:
    """Print scenes numbered from start, matching the numbers retry expects."""
    for i, scene in enumerate(scenes, start):
        print(f"\n  {i}. {scene.text[:70]}")
        print(f"     🔎 {scene.used_term}")
        if scene.has_asset:
            credit = f" by {scene.author_name}" if scene.author_name else ""
            print(f"     🎬 {scene.asset_locator}{credit}")
        else:
            print("     ⚪ No footage found – try: broll-organizer retry <file> "
                  f"{i} \"<new term>\"")


async def _resolve(args: argparse.Namespace, config: AppConfig) -> int:
    script = Path(args.script).read_text(encoding="utf-8")

    def announce(segments):
        print(f"Found {len(segments)} scenes")
        print(f"\n[2/2] Searching {config.provider} footage for each scene...")

    async with FootagePipeline(**default_adapters(config)) as pipeline:
        print("\n[1/2] Analyzing script with AI (Gemini)...")
        scenes = await pipeline.run_script(script, on_segmented=announce)

    found = sum(1 for s in scenes if s.has_asset)
    print(f"\n✅ {len(scenes)} scenes, footage found for {found}")
    print_scenes(scenes)
    if args.output:
        path = save_segments(scenes, args.output)
        print(f"\n💾 Saved to: {path}")
    return 0


async def _retry(args: argparse.Namespace, config: AppConfig) -> int:
    scenes = load_segments(args.results)
    if not 1 <= args.index <= len(scenes):
        raise BrollError(f"Scene index must be between 1 and {len(scenes)}")
    existing = scenes[args.index - 1]

    async with FootagePipeline(**default_adapters(config, segmenter=None)) as pipeline:
        print(f"\n🔁 Searching {config.provider} for {args.term!r}...")
        scenes[args.index - 1] = await pipeline.resolve_one(existing, args.term)

    print_scenes([scenes[args.index - 1]], start=args.index)
    path = save_segments(scenes, args.output or args.results)
    print(f"\n💾 Saved to: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a narration script into scenes and find stock footage for each"
    )
    parser.add_argument("--provider", choices=PROVIDERS, help="Footage provider (default: FOOTAGE_PROVIDER or pexels)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show search log")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Analyze a script and find footage for every scene")
    resolve.add_argument("script", help="Path to a text file with the narration script")
    resolve.add_argument("-o", "--output", help="Write scenes to this JSON file")

    retry = sub.add_parser("retry", help="Search again for one scene with a new term")
    retry.add_argument("results", help="JSON file written by 'resolve'")
    retry.add_argument("index", type=int, help="Scene number as printed (1-based)")
    retry.add_argument("term", help="New search term")
    retry.add_argument("-o", "--output", help="Write to this file instead of updating in place")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("broll_organizer").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = AppConfig.from_env(provider=args.provider)
        handler = _resolve if args.command == "resolve" else _retry
        return asyncio.run(handler(args, config))
    except (BrollError, OSError, ValueError) as e:
        print(f"\n❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
