"""FancyNPCs Converter: dev launcher and offline converter.

    python main.py                                  start the backend (watch mode)
    python main.py --input saves.yml                convert to ./npcs.yml
    python main.py --input saves.yml --source znpcs --output out.yml
"""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

logger = logging.getLogger("npc_converter.cli")


def convert_file(input_path: Path, output_path: Path, source: str, skip_malformed: bool) -> int:
    """Convert one file on disk. Returns a process exit code."""
    from npc_converter.export import to_yaml
    from npc_converter.parser import parse
    from npc_converter.transform import ConversionError, transform

    try:
        text = input_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Cannot read {input_path}: {e}")
        return 1

    try:
        result = transform(parse(text), source, skip_malformed=skip_malformed)
    except ConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    output_path.write_text(to_yaml(result, source, input_path.name), encoding="utf-8")
    stats = result.stats
    print(
        f"Converted {stats.converted_count}/{stats.original_count} NPCs"
        + (f" ({stats.skipped_count} skipped)" if stats.skipped_count else "")
        + f" → {output_path}"
    )
    return 0


def main():
    parser = argparse.ArgumentParser(description="FancyNPCs Converter")
    parser.add_argument("--input", type=Path, default=None,
                        help="Convert this file offline instead of starting the server")
    parser.add_argument("--source", default="citizens",
                        choices=["citizens", "znpcs", "znpcsplus"],
                        help="Source plugin format (default: citizens)")
    parser.add_argument("--output", type=Path, default=Path("npcs.yml"),
                        help="Output file for --input (default: ./npcs.yml)")
    parser.add_argument("--skip-malformed", action="store_true",
                        help="Skip NPC entries with missing fields instead of failing")
    args = parser.parse_args()

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.input:
        sys.exit(convert_file(args.input, args.output, args.source, args.skip_malformed))

    env = os.environ.copy()
    if args.skip_malformed:
        env["SKIP_MALFORMED_ENTRIES"] = "1"

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    proc = subprocess.Popen(
        ["uv", "run", "uvicorn", "backend.app:app", "--reload", "--host", HOST, "--port", BACKEND_PORT],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
