"""
Command-line interface for converting Atlassian Connect descriptors to Forge manifests.

This module provides the `connect-to-forge` CLI.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from connect_to_forge.config import NEXT_STEPS_URL, ConverterSettings
from connect_to_forge.conversion.context import SUPPORTED_PLATFORMS
from connect_to_forge.core.pipeline_runner import MigrationRunner
from connect_to_forge.core.protocols import (
    DescriptorLoader,
    ManifestStore,
    PromptSurface,
)
from connect_to_forge.exceptions import (
    ConfigurationError,
    DescriptorDownloadError,
    DescriptorParseError,
    OperatorAbort,
)
from connect_to_forge.io.descriptor_loader import HttpDescriptorLoader
from connect_to_forge.io.manifest_store import YamlManifestStore
from connect_to_forge.prompts.questions import PROCEED_WITH_WARNINGS
from connect_to_forge.prompts.scripted import ScriptedPromptSurface

EXIT_OK = 0
EXIT_DOWNLOAD_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_CONFIG_ERROR = 3
EXIT_FILESYSTEM_ERROR = 8
EXIT_UNEXPECTED_ERROR = 9


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level logging from every module if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )

    # Keep httpx request lines out of the output unless debugging
    if not debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)


def build_prompt_surface(non_interactive: bool, assume_yes: bool) -> PromptSurface:
    """Pick the interactive surface or the default-answer one."""
    if non_interactive:
        answers = {PROCEED_WITH_WARNINGS: True} if assume_yes else {}
        return ScriptedPromptSurface(answers)

    from connect_to_forge.prompts.questionary_surface import QuestionaryPromptSurface

    return QuestionaryPromptSurface()


def create_parser(settings: ConverterSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="connect-to-forge",
        description="Convert an Atlassian Connect descriptor into a Forge manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a Jira app
  connect-to-forge --type jira --url https://example.com/atlassian-connect.json

  # Write somewhere else and answer every question with its default
  connect-to-forge -t confluence -u https://example.com/descriptor.json \\
    -o build/manifest.yml --non-interactive --yes

Environment:
  CONNECT_TO_FORGE_UNSUPPORTED_MODULES  comma separated module types to flag
  CONNECT_TO_FORGE_HTTP_TIMEOUT         descriptor download timeout (seconds)
  CONNECT_TO_FORGE_RUNTIME_NAME         Forge runtime written to app.runtime
        """,
    )

    parser.add_argument(
        "-u", "--url", required=True, help="Atlassian Connect descriptor URL"
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="platform",
        required=True,
        choices=SUPPORTED_PLATFORMS,
        help="App type (jira or confluence)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(settings.default_output),
        help=f"Output file path (default: {settings.default_output})",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Do not prompt; answer every question with its documented default",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="With --non-interactive, write the manifest even if there are warnings",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    return parser


def run_conversion(
    url: str,
    platform: str,
    output_file: Path,
    settings: ConverterSettings,
    prompts: PromptSurface,
    debug: bool = False,
    loader: DescriptorLoader | None = None,
    store: ManifestStore | None = None,
) -> int:
    """Execute the conversion and map failures to exit codes.

    Returns:
        Process exit code (0 for success or an operator abort).
    """
    logger = logging.getLogger(__name__)

    runner = MigrationRunner(
        loader=loader or HttpDescriptorLoader(timeout=settings.http_timeout),
        store=store or YamlManifestStore(),
        prompts=prompts,
        settings=settings,
    )

    try:
        runner.execute(url, platform, output_file)  # type: ignore[arg-type]
    except OperatorAbort as e:
        print(str(e.args[0]) if e.args else "Aborting as requested!", file=sys.stderr)
        return EXIT_OK
    except DescriptorDownloadError as e:
        logger.error(str(e))
        logger.warning(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_DOWNLOAD_ERROR
    except DescriptorParseError as e:
        logger.error(f"Descriptor parse error: {e}")
        logger.warning(f"Suggestion: {e.get_recovery_hint()}")
        return EXIT_PARSE_ERROR
    except (PermissionError, FileNotFoundError, OSError) as e:
        logger.error(f"File system error: {e}")
        return EXIT_FILESYSTEM_ERROR
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        return EXIT_UNEXPECTED_ERROR

    print(f"Forge manifest generated and saved to {output_file}")
    print()
    print("To continue your journey by registering and deploying this app, please go to:")
    print(NEXT_STEPS_URL)
    return EXIT_OK


def main(argv: list[str] | None = None) -> NoReturn:
    try:
        settings = ConverterSettings.from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(EXIT_CONFIG_ERROR)

    args = create_parser(settings).parse_args(argv)
    configure_logging(args.debug, args.verbose)

    prompts = build_prompt_surface(args.non_interactive, args.yes)
    sys.exit(
        run_conversion(
            args.url, args.platform, args.output, settings, prompts, debug=args.debug
        )
    )


if __name__ == "__main__":
    main()
