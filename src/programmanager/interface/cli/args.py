from __future__ import annotations

"""
CLI Argument Definition.

Defines the sub-command schema of the headless interface: browsing the
hierarchy, creating programs and versions, deleting versions, opening
files and editing the storage configuration.
"""

import argparse

from programmanager.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the ProgramManager CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="programmanager",
        description=i18n.t("app.description"),
    )

    # --- Global Options ---
    p.add_argument(
        "--root",
        dest="root",
        default=None,
        help=i18n.t("cli.args.root"),
    )
    p.add_argument("--json", dest="json_output", action="store_true", help=i18n.t("cli.args.json"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # --- Browsing ---
    sub.add_parser("list", help=i18n.t("cli.commands.list"))

    tree = sub.add_parser("tree", help=i18n.t("cli.commands.tree"))
    tree.add_argument("program")
    tree.add_argument("version")
    tree.add_argument(
        "--expand",
        dest="expand",
        action="append",
        default=[],
        metavar="PATH",
        help=i18n.t("cli.args.expand"),
    )
    tree.add_argument("--expand-all", action="store_true", help=i18n.t("cli.args.expand_all"))

    # --- Mutations ---
    add_program = sub.add_parser("add-program", help=i18n.t("cli.commands.add_program"))
    add_program.add_argument("name")

    add_version = sub.add_parser("add-version", help=i18n.t("cli.commands.add_version"))
    add_version.add_argument("program")
    add_version.add_argument("version")

    delete_version = sub.add_parser("delete-version", help=i18n.t("cli.commands.delete_version"))
    delete_version.add_argument("program")
    delete_version.add_argument("version")
    delete_version.add_argument("-y", "--yes", action="store_true", help=i18n.t("cli.args.yes"))

    open_cmd = sub.add_parser("open", help=i18n.t("cli.commands.open"))
    open_cmd.add_argument("path")

    # --- Configuration ---
    config = sub.add_parser("config", help=i18n.t("cli.commands.config"))
    config_sub = config.add_subparsers(dest="config_command", metavar="ACTION")
    config_sub.required = True
    config_sub.add_parser("show", help=i18n.t("cli.commands.config_show"))
    config_set = config_sub.add_parser("set", help=i18n.t("cli.commands.config_set"))
    config_set.add_argument("--local-path", dest="local_path", default=None)
    config_set.add_argument("--mirror-path", dest="mirror_path", default=None)

    return p
