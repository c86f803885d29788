"""Entry point: python -m tfs_bridge [--mappings FILE] [--excluded-renames FILE]"""

from __future__ import annotations

import argparse
import sys

from tfs_bridge.config_files import TfsBridgeConfigError, load_config_files
from tfs_bridge.infrastructure.config import METADATA_DIR
from tfs_bridge.infrastructure.logger import install_exception_hooks, logger


def main(argv: list[str] | None = None) -> int:
    install_exception_hooks()

    parser = argparse.ArgumentParser(
        prog="tfs_bridge",
        description="Load the mappings and excluded renames files and print what was read.",
    )
    parser.add_argument("--mappings", help="path mappings file (<tfs-path>[;<local-path>] per line)")
    parser.add_argument("--excluded-renames", help="file with one changeset id per line")
    parser.add_argument("--metadata-dir", default=str(METADATA_DIR), help="directory holding cached copies")
    parser.add_argument("--no-cache", action="store_true", help="do not copy supplied files into the metadata dir")
    args = parser.parse_args(argv)

    try:
        summary = load_config_files(
            args.metadata_dir,
            mappings_path=args.mappings,
            excluded_renames_path=args.excluded_renames,
            allow_caching=not args.no_cache,
        )
    except TfsBridgeConfigError as err:
        logger.error(str(err), **err.details)
        return 1

    print(summary.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
