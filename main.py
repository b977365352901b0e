#!/usr/bin/env python3
"""config.json のアップロードタスクを実行

使い方: main.py [config.json] [--dry-run]
"""
import sys
from typing import List, Optional

from s3utils import S3Uploader


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    dry_run = "--dry-run" in args
    paths = [arg for arg in args if arg != "--dry-run"]
    config_path = paths[0] if paths else "config.json"

    try:
        successful, failed = S3Uploader.from_file(config_path, dry_run=dry_run).run()
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{successful} uploaded, {failed} failed")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
