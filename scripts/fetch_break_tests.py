#!/usr/bin/env python3
"""Download the Unicode *BreakTest.txt conformance files into tests/data/."""
import argparse
import logging
import sys
import time
from pathlib import Path

import requests

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

from segkit.unicode.properties import UNICODE_VERSION

logger = logging.getLogger("segkit.fetch")

UA = "segkit-fetch/0.1"
RETRIES = 3
BASE_URL = "https://www.unicode.org/Public/{version}/ucd/auxiliary/{name}"
FILES = ("GraphemeBreakTest.txt", "WordBreakTest.txt", "SentenceBreakTest.txt")


def download_file(url: str, path: Path, timeout: int = 60) -> bool:
    """Download URL to path with retries. Returns True on success."""
    path.parent.mkdir(parents=True, exist_ok=True)
    headers = {"User-Agent": UA, "Accept": "text/plain,*/*"}
    for attempt in range(RETRIES):
        try:
            r = requests.get(url, headers=headers, timeout=timeout)
            if r.status_code != 200:
                logger.error("GET %s returned %d", url, r.status_code)
                return False
            path.write_bytes(r.content)
            return path.stat().st_size > 0
        except requests.RequestException as e:
            logger.warning("GET %s failed (attempt %d/%d): %s", url, attempt + 1, RETRIES, e)
            if attempt < RETRIES - 1:
                time.sleep(2 ** attempt)
    return False


def main():
    p = argparse.ArgumentParser(description="Fetch UAX #29 conformance test files")
    p.add_argument("--version", default=UNICODE_VERSION, help="Unicode version directory to fetch from")
    p.add_argument("--out", default=str(root / "tests" / "data"))
    p.add_argument("--force", action="store_true", help="Re-download files that already exist")
    args = p.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    out = Path(args.out)
    failed = 0
    for name in FILES:
        dest = out / name
        if dest.exists() and not args.force:
            logger.info("%s exists, skipping", dest)
            continue
        url = BASE_URL.format(version=args.version, name=name)
        if download_file(url, dest):
            logger.info("Saved %s", dest)
        else:
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
