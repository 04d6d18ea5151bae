from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Headless counterpart of the desktop window. Bootstraps logging, resolves
the storage configuration (persisted state plus the --root override),
rebuilds the hierarchy through a ProgramManagerSession, and dispatches the
requested sub-command. Results are rendered as text or JSON.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, List, Optional

from programmanager.core.session import ProgramManagerSession
from programmanager.domain import constants as const
from programmanager.domain.config import load_config
from programmanager.domain.navigation import collect_directory_paths, visible_rows
from programmanager.domain.operation_models import OperationResult
from programmanager.infra.logging import LoggingConfig, configure_logging, get_logger
from programmanager.interface.cli import args as cli_args
from programmanager.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only)
    configure_logging(LoggingConfig(level="DEBUG" if args.debug else "INFO", console=True))

    # 3. Configuration resolution
    config = load_config()
    if args.root:
        config["local_path"] = args.root
    session = ProgramManagerSession(config)
    logger.debug(f"CLI session root: {session.root_path}")

    try:
        if args.command == "config":
            return _run_config(session, args)

        refresh = session.refresh()
        if not refresh.ok:
            return _report(refresh, args.json_output)

        return _dispatch(session, args)
    except KeyboardInterrupt:
        print(i18n.t("cli.status.interrupted"), file=sys.stderr)
        return EXIT_INTERRUPTED

# -----------------------------------------------------------------------------
# COMMAND HANDLERS
# -----------------------------------------------------------------------------

def _dispatch(session: ProgramManagerSession, args: Any) -> int:
    command = args.command

    if command == "list":
        return _run_list(session, args.json_output)

    if command == "tree":
        return _run_tree(session, args)

    if command == "add-program":
        return _report(session.add_program(args.name), args.json_output)

    if command == "add-version":
        if not _select(session, args.program):
            return EXIT_USAGE
        return _report(session.add_version(args.version), args.json_output)

    if command == "delete-version":
        if not _select(session, args.program, args.version):
            return EXIT_USAGE
        if not args.yes and not _confirm(
                i18n.t("cli.prompts.delete_confirm", program=args.program, version=args.version)
        ):
            print(i18n.t("cli.status.aborted"), file=sys.stderr)
            return EXIT_FAILURE
        return _report(session.delete_selected_version(), args.json_output)

    if command == "open":
        return _report(session.open_file(os.path.abspath(args.path)), args.json_output)

    return EXIT_USAGE


def _run_list(session: ProgramManagerSession, json_output: bool) -> int:
    if json_output:
        payload = [
            {
                "name": program.name,
                "path": program.path,
                "versions": [{"version": v.version, "path": v.path} for v in program.versions],
            }
            for program in session.hierarchy
        ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return EXIT_OK

    if not session.hierarchy:
        print(i18n.t("cli.status.no_programs", root=session.root_path))
        return EXIT_OK

    for program in session.hierarchy:
        print(program.name)
        for version in program.versions:
            print(f"  {version.version}")
    return EXIT_OK


def _run_tree(session: ProgramManagerSession, args: Any) -> int:
    if not _select(session, args.program, args.version):
        return EXIT_USAGE

    version = session.selected_version_data()
    if version is None:
        return EXIT_USAGE

    if args.json_output:
        print(json.dumps(asdict(version), ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.expand_all:
        expanded = collect_directory_paths(version.modules)
    else:
        expanded = frozenset(
            os.path.abspath(os.path.join(version.path, p)) for p in args.expand
        )
    for path in expanded:
        session.toggle_node(path)

    print(f"{args.program}/{version.version}")
    for line in render_tree_lines(visible_rows(version.modules, session.state.expanded_paths),
                                  session.state.expanded_paths):
        print(line)
    return EXIT_OK


def _run_config(session: ProgramManagerSession, args: Any) -> int:
    if args.config_command == "show":
        data = dict(session.config)
        data["resolved_local_path"] = session.root_path
        if args.json_output:
            print(json.dumps(data, ensure_ascii=False, indent=2))
        else:
            print(i18n.t("cli.config.local_path", path=data["local_path"]))
            print(i18n.t("cli.config.mirror_path", path=data["mirror_path"]))
        return EXIT_OK

    local_path = args.local_path if args.local_path is not None else session.config["local_path"]
    mirror_path = args.mirror_path if args.mirror_path is not None else session.config["mirror_path"]
    return _report(session.update_config(local_path, mirror_path), args.json_output)

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def render_tree_lines(rows: List[Any], expanded_paths: frozenset) -> List[str]:
    """
    Format visible tree rows for the terminal.

    Directories carry '-' when expanded and '+' when collapsed.
    """
    lines: List[str] = []
    for node, depth in rows:
        indent = "  " * (depth + 1)
        if node.is_directory:
            marker = "-" if node.path in expanded_paths else "+"
            lines.append(f"{indent}{marker} {node.name}/")
        else:
            lines.append(f"{indent}  {node.name}")
    return lines


def _report(result: OperationResult, json_output: bool) -> int:
    """Print an OperationResult and map it to an exit code."""
    if json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif result.ok:
        print(i18n.t(f"cli.success.{result.action}", default="OK: {target}", target=result.target))
    else:
        message = i18n.t(
            f"errors.{result.error_kind}", default="{error}", target=result.target, error=result.error
        )
        print(f"ERROR: {message}", file=sys.stderr)

    if result.ok:
        return EXIT_OK
    if result.error_kind in (const.ERR_INVALID_NAME, const.ERR_NO_SELECTION):
        return EXIT_USAGE
    return EXIT_FAILURE


def _select(session: ProgramManagerSession, program: str, version: Optional[str] = None) -> bool:
    """Select program (and version); print an error if either is missing."""
    session.select_program(program)
    if session.state.selected_program is None:
        print(f"ERROR: {i18n.t('cli.errors.program_not_found', program=program)}", file=sys.stderr)
        return False
    if version is None:
        return True
    session.select_version(version)
    if session.state.selected_version is None:
        print(
            f"ERROR: {i18n.t('cli.errors.version_not_found', program=program, version=version)}",
            file=sys.stderr,
        )
        return False
    return True


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


if __name__ == "__main__":
    sys.exit(main())
