"""Generate .env.example from .env by stripping values."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from util_dotenv.services.template_generator import generate_template_file
from util_dotenv.utils.errors import EnvFileError

root = Path(__file__).resolve().parents[1]


def write_template(src: Path, dest: Path) -> Path:
    generate_template_file(src, dest)
    return dest


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--root', type=Path, default=root)
    args = parser.parse_args()

    try:
        dest = write_template(args.root / '.env', args.root / '.env.example')
    except EnvFileError as exc:
        print(f'Could not write template: {exc}', file=sys.stderr)
        sys.exit(1)
    print(f'Wrote template to {dest}')
