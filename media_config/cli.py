# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Inspect and edit stored media configs from a shell.
#
# COMMANDS:
# ---------
# 1. Show the digest / filename for a URI:
#    python -m media_config.cli digest "file:///a.mp4"
#
# 2. Print the stored config as JSON:
#    python -m media_config.cli get "file:///a.mp4"
#
# 3. Save a config:
#    python -m media_config.cli put "file:///a.mp4" --resize-mode 1 \
#        --aspect-ratio 1.78 --title 16:9 --scale 1.25
#
# 4. Change only the zoom of an existing config:
#    python -m media_config.cli update-scale "file:///a.mp4" 2.0
#
#   --base-dir overrides MEDIA_CONFIG_BASE_DIR for any command.
#   Exit status is 1 when there is no config or a write failed.
#
# ==============================================

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from media_config.config import get_config
from media_config.hashing import key_digest, config_filename
from media_config.logging_config import setup_logging
from media_config.persistence import ConfigStore, VideoConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="media-config",
        description="Read and write per-media display settings",
    )
    parser.add_argument("--base-dir", help="Directory holding the configs folder")
    sub = parser.add_subparsers(dest="command", required=True)

    p_digest = sub.add_parser("digest", help="Print the digest and filename for a key")
    p_digest.add_argument("key")

    p_get = sub.add_parser("get", help="Print the stored config as JSON")
    p_get.add_argument("key")

    p_put = sub.add_parser("put", help="Save a config, replacing any existing one")
    p_put.add_argument("key")
    p_put.add_argument("--resize-mode", type=int, required=True)
    p_put.add_argument("--aspect-ratio", type=float, required=True)
    p_put.add_argument("--title", default="", help="Aspect ratio label, must not contain ','")
    p_put.add_argument("--scale", type=float, default=1.0)

    p_scale = sub.add_parser("update-scale", help="Change the scale of an existing config")
    p_scale.add_argument("key")
    p_scale.add_argument("scale", type=float)

    return parser


def _open_store(base_dir: Optional[str]) -> ConfigStore:
    config = get_config()
    if base_dir:
        config = replace(config, store=replace(config.store, base_dir=base_dir))
    setup_logging(config.log_level, config.log_file)
    return ConfigStore.from_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "digest":
        print(key_digest(args.key))
        print(config_filename(args.key))
        return 0

    store = _open_store(args.base_dir)

    if args.command == "get":
        record = store.get(args.key)
        if record is None:
            print(f"no config for {args.key}", file=sys.stderr)
            return 1
        print(json.dumps(record.to_dict(), ensure_ascii=False))
        return 0

    if args.command == "put":
        record = VideoConfig(
            resize_mode=args.resize_mode,
            aspect_ratio=args.aspect_ratio,
            aspect_ratio_title=args.title,
            scale=args.scale,
        )
        result = store.put(args.key, record)
        if not result.ok:
            print(f"failed to save config: {result.error}", file=sys.stderr)
            return 1
        print(store.path_for(args.key))
        return 0

    if args.command == "update-scale":
        result = store.update_scale(args.key, args.scale)
        if result is None:
            print(f"no config for {args.key}", file=sys.stderr)
            return 1
        if not result.ok:
            print(f"failed to save config: {result.error}", file=sys.stderr)
            return 1
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
