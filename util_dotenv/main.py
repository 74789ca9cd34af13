from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from util_dotenv import __version__
from util_dotenv.config import get_settings
from util_dotenv.services.interactive_filler import Prompt, fill_env_file
from util_dotenv.services.prompter import ConsolePrompter
from util_dotenv.services.storage import EnvFileStorage
from util_dotenv.services.template_generator import generate_template_file
from util_dotenv.utils.errors import EnvFileIOError, EnvFileNotFoundError, PromptCancelledError
from util_dotenv.utils.logging_config import configure_logging

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_NOT_FOUND = 2

CANCELLED_MESSAGE = "Configuration cancelled. No file was written."

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="util-dotenv",
        description="Generate .env.example templates and fill .env files from them.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("gen-env-example", help="Create .env.example by copying keys from .env")
    gen.add_argument("-i", "--input", default=settings.env_file, help="Path to the input .env file")
    gen.add_argument("-o", "--output", default=settings.example_file, help="Path to the output example file")
    gen.add_argument("-q", "--quiet", action="store_true", default=settings.quiet, help="Suppress all console output")

    configure = subparsers.add_parser(
        "configure-env",
        help="Generate a .env file by reading from a .env.example file, prompting for any missing values",
    )
    configure.add_argument("-i", "--input", default=settings.example_file, help="Path to the source .env.example file")
    configure.add_argument("-o", "--output", default=settings.env_file, help="Path where the generated .env file will be saved")
    configure.add_argument("-q", "--quiet", action="store_true", default=settings.quiet, help="Suppress all console output")
    return parser


def run_gen_env_example(args: argparse.Namespace, storage: EnvFileStorage) -> int:
    try:
        generate_template_file(Path(args.input).resolve(), Path(args.output).resolve(), storage)
    except EnvFileNotFoundError:
        logger.error("[ERROR]: Input file `%s` not found.", args.input)
        return EXIT_NOT_FOUND
    except EnvFileIOError as exc:
        logger.error("[ERROR]: %s.", exc.reason)
        logger.error("[ERROR]: Can't generate `%s`.", args.output)
        return EXIT_IO_ERROR
    logger.info("`%s` file generated.", args.output)
    return EXIT_OK


def run_configure_env(args: argparse.Namespace, storage: EnvFileStorage, prompt: Prompt) -> int:
    try:
        result = fill_env_file(Path(args.input).resolve(), Path(args.output).resolve(), prompt, storage)
    except PromptCancelledError:
        logger.warning(CANCELLED_MESSAGE)
        return EXIT_OK
    except EnvFileNotFoundError:
        logger.error("[ERROR]: Input file `%s` not found.", args.input)
        return EXIT_NOT_FOUND
    except EnvFileIOError as exc:
        logger.error("[ERROR]: %s.", exc.reason)
        return EXIT_IO_ERROR

    if not result.committed:
        logger.warning(CANCELLED_MESSAGE)
        return EXIT_OK
    logger.info("`%s` file created successfully.", args.output)
    return EXIT_OK


def main(argv: Sequence[str] | None = None, prompt: Prompt | None = None) -> int:
    settings = get_settings()
    args = build_parser().parse_args(argv)
    configure_logging(settings.log_level, quiet=args.quiet)
    storage = EnvFileStorage(settings.encoding)

    if args.command == "gen-env-example":
        return run_gen_env_example(args, storage)
    return run_configure_env(args, storage, prompt or ConsolePrompter())


if __name__ == "__main__":
    raise SystemExit(main())
