"""Main orchestration script for generating the documentation catalog."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the catalog generation pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate docs-data.json for the utility library docs site."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating the catalog",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Library root containing src/ and package.json",
    )
    parser.add_argument(
        "--scanner",
        choices=["lexer", "regex"],
        help="Declaration scanner to use",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with catalog generation.\n")

    print("--- Generating documentation catalog ---")
    cmd = [sys.executable, "-m", "doccatalog.generate_docs_data", args.root]
    if args.scanner:
        cmd.extend(["--scanner", args.scanner])
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
