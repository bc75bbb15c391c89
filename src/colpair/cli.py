"""Command-line interface for colpair."""

import argparse
import logging
import shlex
import sys
from typing import Optional

from .catalog import ColumnCatalog, sample_source_catalog, sample_target_catalog
from .config import settings
from .modes import PairingMode, ModeChangeStatus
from .pairing import (
    ConfigurationSession,
    Pair,
    PairingError,
    Relation,
    RelationKind,
    Side,
    color_name,
)

MODE_ALIASES = {
    "bulk": PairingMode.BULK_POSITIONAL,
    "bulk_positional": PairingMode.BULK_POSITIONAL,
    "self": PairingMode.SELF_PAIRED,
    "self_paired": PairingMode.SELF_PAIRED,
}

RELATION_ALIASES = {
    "mapping": RelationKind.MAPPING,
    "map": RelationKind.MAPPING,
    "keys": RelationKind.KEY_VALIDATION,
    "key_validation": RelationKind.KEY_VALIDATION,
}

HELP_TEXT = """Commands:
  use mapping|keys            switch the active relation
  select left|right <id>      toggle a column in a staged selection
  move left|right <id> <id>   move a staged column to another's position
  commit                      commit the staged selections
  add <left_id> <right_id>    append a single pair
  remove <pair_id>            remove a pair
  reorder <pair_id> <pair_id> move a pair to another's position
  edit | done                 open or close the editor
  mode bulk|self              request a mode change
  confirm | cancel            answer a pending mode change
  available left|right        columns not yet used on a side
  show | status | help | quit"""


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="colpair - ordered column mapping and key/validation pairing"
    )
    parser.add_argument(
        "--log-level",
        default="DEBUG" if settings.debug else settings.log_level,
        help="Logging level (default: from LOG_LEVEL, DEBUG when DEBUG=true)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("catalog", help="Print the sample source and target catalogs")
    subparsers.add_parser("demo", help="Run a scripted mapping session on the sample catalogs")
    subparsers.add_parser("interactive", help="Start an interactive pairing session")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "catalog":
        run_catalog()
    elif args.command == "demo":
        run_demo()
    elif args.command == "interactive":
        run_interactive()
    else:
        parser.print_help()
        sys.exit(1)


def format_pair(pair: Pair) -> str:
    """One-line rendering of a pair."""
    if pair.is_self_paired:
        text = f"{pair.id}: {pair.left.label()}"
    else:
        text = f"{pair.id}: {pair.left.label()} -> {pair.right.label()}"
    if pair.color_index is not None:
        text += f" [{color_name(pair.color_index)}]"
    return text


def _print_pairs(title: str, pairs: tuple[Pair, ...]):
    print(f"{title} ({len(pairs)})")
    for pair in pairs:
        print(f"  {format_pair(pair)}")


def _print_catalog(title: str, catalog: ColumnCatalog):
    print(title)
    for column in catalog:
        print(f"  {column.id:<8} {column.label()}")


def run_catalog():
    """Print the bundled sample catalogs."""
    _print_catalog("Source columns", sample_source_catalog())
    _print_catalog("Target columns", sample_target_catalog())


def run_demo():
    """Run a scripted session and print every change notification."""
    session = ConfigurationSession(
        sample_source_catalog(),
        sample_target_catalog(),
        on_mapping_change=lambda pairs: _print_pairs("Mapping changed", pairs),
        on_key_validation_change=lambda pairs: _print_pairs("Key & validation changed", pairs),
    )
    mapping = session.mapping

    for column_id in ("src_1", "src_2"):
        mapping.toggle_selection(Side.LEFT, column_id)
    for column_id in ("tgt_2", "tgt_1"):
        mapping.toggle_selection(Side.RIGHT, column_id)
    print(f"Staged: {mapping.left.ids} / {mapping.right.ids}")
    mapping.commit()

    mapping.remove(mapping.pairs[0].id)
    mapping.reorder([pair.id for pair in mapping.pairs])

    keys = session.key_validation
    keys.toggle_selection(Side.LEFT, "src_1")
    keys.toggle_selection(Side.RIGHT, "tgt_1")
    keys.commit()

    result = keys.request_mode_change(PairingMode.SELF_PAIRED)
    print(f"Mode change: {result.message}")
    keys.cancel_mode_change()

    summary = session.summary()
    print(
        f"Done: {summary.mapping_count} mappings ({summary.mapping_mode.value}), "
        f"{summary.key_validation_count} key pairs ({summary.key_validation_mode.value})"
    )


def _print_status(relation: Relation):
    status = relation.selection_status()
    print(f"{relation.kind.value}: mode={relation.mode.value} state={relation.state.value}")
    if relation.pending_mode is not None:
        print(f"  pending switch to {relation.pending_mode.value} (confirm/cancel)")
    if relation.is_self_paired:
        print(f"  selected: {relation.single.ids}")
    else:
        print(f"  {relation.profile.left_label.lower()}: {relation.left.ids}")
        print(f"  {relation.profile.right_label.lower()}: {relation.right.ids}")
    if status.message:
        print(f"  {status.message}")


def handle_command(session: ConfigurationSession, relation: Relation, words: list[str]) -> Relation:
    """
    Apply one interactive command.

    Returns:
        The relation that is active after the command
    """
    command, args = words[0].lower(), words[1:]

    if command == "use":
        return session.relation(RELATION_ALIASES[args[0].lower()])
    elif command == "select":
        relation.toggle_selection(Side(args[0].lower()), args[1])
        _print_status(relation)
    elif command == "move":
        relation.reorder_selection(Side(args[0].lower()), args[1], args[2])
        _print_status(relation)
    elif command == "commit":
        relation.commit()
    elif command == "add":
        relation.add_pair(args[0] if args else None, args[1] if len(args) > 1 else None)
    elif command == "remove":
        relation.remove(args[0])
    elif command == "reorder":
        relation.move_pair(args[0], args[1])
    elif command == "edit":
        relation.begin_edit()
        _print_status(relation)
    elif command == "done":
        relation.end_edit()
    elif command == "mode":
        result = relation.request_mode_change(MODE_ALIASES[args[0].lower()])
        print(result.message)
        if result.status == ModeChangeStatus.PENDING_CONFIRMATION:
            print("Type 'confirm' to continue or 'cancel' to keep your pairs.")
    elif command == "confirm":
        result = relation.confirm_mode_change()
        print(result.message if result else "Nothing to confirm.")
    elif command == "cancel":
        print("Cancelled." if relation.cancel_mode_change() else "Nothing to cancel.")
    elif command == "available":
        for column in relation.available_columns(Side(args[0].lower())):
            print(f"  {column.id:<8} {column.label()}")
    elif command == "show":
        _print_pairs(f"Final {relation.kind.value} pairs", relation.visible_pairs())
    elif command == "status":
        _print_status(relation)
    elif command == "help":
        print(HELP_TEXT)
    else:
        print(f"Unknown command '{command}'. Type 'help' for a list of commands.")
    return relation


def run_interactive():
    """Run an interactive CLI session."""
    print("colpair Interactive Mode")
    print("=" * 40)
    print("Type 'help' for commands, 'quit' or 'exit' to exit.")
    print()

    session = ConfigurationSession(
        sample_source_catalog(),
        sample_target_catalog(),
        on_mapping_change=lambda pairs: _print_pairs("Mappings", pairs),
        on_key_validation_change=lambda pairs: _print_pairs("Key & validation pairs", pairs),
    )
    relation = session.mapping

    while True:
        try:
            line = input(f"{relation.kind.value}> ").strip()
        except EOFError:
            break

        if not line:
            continue

        if line.lower() in ("quit", "exit"):
            print("Goodbye!")
            break

        try:
            relation = handle_command(session, relation, shlex.split(line))
        except PairingError as e:
            print(f"Error: {e}")
        except (IndexError, KeyError, ValueError) as e:
            print(f"Invalid command: {e}. Type 'help' for usage.")


if __name__ == "__main__":
    main()
