from __future__ import annotations

"""
CLI Argument Definition.

Defines the command-line interface schema: the 'init', 'generate' and
'watch' subcommands, their options, and the global logging switches.
"""

import argparse

from assetlink.core.services.watcher import POLL_INTERVAL_S
from assetlink.domain.constants import APP_NAME, APP_VERSION, CONFIG_TEMPLATE_NAMES, DEFAULT_CONFIG_FILE
from assetlink.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the assetlink CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    sub = p.add_subparsers(dest="command", metavar="{init,generate,watch}")
    sub.required = True

    # --- init ---
    p_init = sub.add_parser("init", help=i18n.t("cli.args.init"))
    p_init.add_argument(
        "--format",
        dest="config_format",
        choices=sorted(CONFIG_TEMPLATE_NAMES),
        default="json",
        help=i18n.t("cli.args.format"),
    )
    p_init.add_argument(
        "--dir",
        dest="target_dir",
        default=".",
        help=i18n.t("cli.args.dir"),
    )

    # --- generate ---
    p_gen = sub.add_parser("generate", help=i18n.t("cli.args.generate"))
    _add_config_option(p_gen)
    p_gen.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )
    p_gen.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- watch ---
    p_watch = sub.add_parser("watch", help=i18n.t("cli.args.watch"))
    _add_config_option(p_watch)
    p_watch.add_argument(
        "--interval",
        type=float,
        default=POLL_INTERVAL_S,
        help=i18n.t("cli.args.interval"),
    )

    return p

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _add_config_option(parser: argparse.ArgumentParser) -> None:
    """Attach the shared -c/--config option."""
    parser.add_argument(
        "-c", "--config",
        dest="config_path",
        default=DEFAULT_CONFIG_FILE,
        help=i18n.t("cli.args.config"),
    )
