from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, subcommand dispatch
('init', 'generate', 'watch'), and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional

from assetlink.core.pipeline.engine import run_generation
from assetlink.core.pipeline.stages.validator import to_serializable
from assetlink.core.services.config_loader import load_config, write_config_template
from assetlink.core.services.watcher import watch
from assetlink.domain.config import AssetConfig
from assetlink.domain.pipeline_models import GenerationResult
from assetlink.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from assetlink.interface.cli import args as cli_args
from assetlink.utils.i18n import i18n

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug(f"CLI execution initiated: command={args.command}")

    # 3. Command dispatch
    try:
        if args.command == "init":
            return _cmd_init(args.target_dir, args.config_format)
        if args.command == "generate":
            return _cmd_generate(args.config_path, args.dry_run, args.json_output)
        return _cmd_watch(args.config_path, args.interval)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return 130
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _cmd_init(target_dir: str, config_format: str) -> int:
    """Create a starter configuration file unless one already exists."""
    created = write_config_template(target_dir, config_format)
    if created is None:
        print(i18n.t("cli.status.config_exists"))
    else:
        print(i18n.t("cli.status.config_created", path=created))
    return 0


def _cmd_generate(config_path: str, dry_run: bool, json_output: bool) -> int:
    """Run a single generation and render its result."""
    config = _load_config(config_path)
    result = run_generation(config, dry_run=dry_run)

    if json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif dry_run and result.ok:
        sys.stdout.write(result.code)
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1


def _cmd_watch(config_path: str, interval: float) -> int:
    """Generate once, then keep regenerating until interrupted."""
    config = _load_config(config_path)
    print(i18n.t("cli.status.watching", path=config.root_dir))
    watch(config, interval=interval, on_result=_print_human_summary)
    return 0


def _load_config(config_path: str) -> AssetConfig:
    config = load_config(config_path)
    logger.debug(f"Resolved configuration: {json.dumps(to_serializable(config))}")
    return config

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult) -> None:
    """
    Format and print a generation result to the terminal.

    Args:
        result: The generation result to render.
    """
    if not result.ok:
        print("ERROR: " + i18n.t("cli.errors.generation_fail", error=result.error), file=sys.stderr)
        return

    if result.summary.get("unchanged"):
        print(i18n.t("cli.status.unchanged", path=result.output_file))
    else:
        print(i18n.t("cli.status.success"))
        print(i18n.t("cli.status.output", path=result.output_file))

    print(i18n.t("cli.status.assets", count=result.assets_generated, files=result.files_found))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
