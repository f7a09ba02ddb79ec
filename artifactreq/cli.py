"""
CLI - Command-line interface for artifact requirement extraction.

Main entry point for the application. Orchestrates:
1. Configuration loading (.env, YAML file, flags)
2. Requirement extraction per artifact
3. Output as JSON or YAML to file or stdout
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, List, Sequence

import yaml
from dotenv import load_dotenv, find_dotenv

from .core.config import AppConfig, OutputFormat, load_config
from .loader import BasePluginLoader, MockPluginLoader, PluginInfo
from .models import ArtifactType
from .resolver import RequirementResolver, ExtractionResult
from .utils.logger import setup_logging, get_logger, LogContext, log_exception

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="artifactreq",
        description="Extract version requirements from rules files and plugins",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s rules/falco_rules.yaml
  %(prog)s -t plugin build/libk8saudit.so -f yaml
  %(prog)s rules/*.yaml -o requirements.json --strict-missing
        """,
    )

    parser.add_argument(
        "inputs",
        type=Path,
        nargs="+",
        help="Artifact files (rules files or compiled plugins)",
    )

    parser.add_argument(
        "-t", "--type",
        choices=["auto", "rulesfile", "plugin"],
        default="auto",
        help="Artifact type (default: guess from file name)",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["json", "yaml"],
        help="Output format (default: from config, json)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "--strict-missing",
        action="store_true",
        help="Fail on rules files that declare no requirement",
    )

    parser.add_argument(
        "--mock-loader",
        action="store_true",
        help="Use a mock plugin loader (no shared library loading)",
    )

    parser.add_argument(
        "--mock-api-version",
        default="3.0.0",
        help="API version reported by the mock loader (default: 3.0.0)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def format_results(results: List[ExtractionResult], output_format: OutputFormat, indent: int = 2) -> str:
    """Render extraction results as JSON or YAML."""
    data = [r.to_dict() for r in results]

    if output_format is OutputFormat.YAML:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return json.dumps(data, indent=indent)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        setup_logging(level="INFO")
        logger.error(f"Invalid configuration: {e}")
        return 1

    log_level = "DEBUG" if args.verbose else config.logging.level
    setup_logging(
        level=log_level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    if args.config:
        logger.info(f"Loaded config from: {args.config}")
    if args.format:
        config.output.format = OutputFormat(args.format)
    if args.strict_missing:
        config.extraction.allow_missing = False

    plugin_loader: Optional[BasePluginLoader] = None
    if args.mock_loader:
        plugin_loader = MockPluginLoader(
            default_info=PluginInfo(required_api_version=args.mock_api_version),
        )
        logger.info("Using mock plugin loader")

    artifact_type = None if args.type == "auto" else ArtifactType.from_string(args.type)

    resolver = RequirementResolver(config=config, plugin_loader=plugin_loader)
    with LogContext(logger, "Extracting requirements", artifacts=len(args.inputs)):
        results = resolver.extract_all(args.inputs, artifact_type)

    output = format_results(results, config.output.format, config.output.indent)

    try:
        if args.output:
            args.output.write_text(output, encoding="utf-8")
            logger.info(f"Output written to: {args.output}")
        else:
            print(output)

    except OSError as e:
        log_exception(logger, "Unable to write output", e)
        return 1

    failed = [r for r in results if not r.success]
    if failed:
        logger.error(f"{len(failed)} of {len(results)} artifacts failed")
        return 1

    logger.info("Completed successfully")
    return 0


def run_extraction(
    input_paths: Sequence[str | Path],
    output_path: Optional[str | Path] = None,
    config: Optional[AppConfig] = None,
    artifact_type: Optional[ArtifactType] = None,
    plugin_loader: Optional[BasePluginLoader] = None,
) -> List[dict]:
    """
    Programmatic interface to extract requirements.

    Args:
        input_paths: Paths to artifacts
        output_path: Optional path to write output
        config: Optional configuration
        artifact_type: Type of all artifacts (guessed per file if None)
        plugin_loader: Optional plugin loader

    Returns:
        List of result dicts, one per artifact
    """
    config = config or AppConfig()

    resolver = RequirementResolver(config=config, plugin_loader=plugin_loader)
    results = resolver.extract_all(input_paths, artifact_type)

    if output_path:
        output_path = Path(output_path)
        output_path.write_text(
            format_results(results, config.output.format, config.output.indent),
            encoding="utf-8",
        )

    return [r.to_dict() for r in results]


if __name__ == "__main__":
    sys.exit(main())
