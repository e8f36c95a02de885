"""Terminal rendering and interactive browsing."""

import shlex

from spellbrowser.core import SpellNotVisibleError, Table
from spellbrowser.engine import LevelGroup, SpellBrowser
from .detail import SpellDetail, build_spell_detail, display_name


# ANSI color codes for output
class Colors:
    CYAN = "\033[36m"      # Headings, prompts
    YELLOW = "\033[33m"    # Spell names
    DIM = "\033[2m"        # Secondary info
    MAGENTA = "\033[35m"   # Reversible notes
    RED = "\033[31m"       # Errors
    GREEN = "\033[32m"     # Enabled markers
    BOLD = "\033[1m"
    RESET = "\033[0m"      # Reset to default


HELP_TEXT = """Commands:
  classes                 List classes
  sources                 List sources (enabled ones are marked)
  class NAME|-            Select a class ('-' for no class)
  source on|off NAME      Enable or disable a source
  list                    Show spells grouped by level
  open NAME               Show a spell's details
  close                   Close the open spell
  help                    Show this help
  quit                    Exit"""


def format_level_groups(groups: list[LevelGroup]) -> str:
    """Format grouped spells as 'Level N' sections."""
    if not groups:
        return f"{Colors.DIM}No spells match the current filters.{Colors.RESET}"

    sections = []
    for group in groups:
        lines = [f"{Colors.CYAN}Level {group.level}{Colors.RESET}"]
        lines.extend(f"  {Colors.YELLOW}{display_name(spell)}{Colors.RESET}" for spell in group.spells)
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def format_sources(browser: SpellBrowser) -> str:
    enabled = set(browser.selected_source_names)
    lines = []
    for name in browser.source_names:
        mark = f"{Colors.GREEN}[x]{Colors.RESET}" if name in enabled else "[ ]"
        lines.append(f"  {mark} {name}")
    return "\n".join(lines)


def format_classes(browser: SpellBrowser) -> str:
    lines = []
    for name in browser.sorted_class_list:
        mark = "*" if name == browser.selected_class else " "
        lines.append(f" {mark} {name}")
    return "\n".join(lines)


def format_table(table: Table) -> str:
    """Format a padded table block as aligned text columns."""
    rows = [table.headers, *table.rows]
    # Rows longer than the header still get every cell shown
    columns = max(len(row) for row in rows)
    widths = [
        max(len(row[i]) if i < len(row) else 0 for row in rows)
        for i in range(columns)
    ]

    def fmt_row(row: tuple[str, ...]) -> str:
        cells = (*row, *[""] * (columns - len(row)))
        return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt_row(table.headers), "-+-".join("-" * width for width in widths)]
    lines.extend(fmt_row(row) for row in table.rows)
    return "\n".join(lines)


def format_spell_detail(detail: SpellDetail) -> str:
    """Format a spell's detail view for the terminal."""
    lines = [f"{Colors.BOLD}{Colors.YELLOW}{detail.title}{Colors.RESET}"]
    if detail.reversible_note:
        lines.append(f"{Colors.MAGENTA}{detail.reversible_note}{Colors.RESET}")
    lines.append("")

    fields = [
        ("Level", str(detail.level)),
        ("School", detail.school),
        ("Components", detail.components),
        ("Casting Time", detail.casting_time),
        ("Range", detail.range),
        ("Duration", detail.duration),
        ("Area of Effect", detail.area_of_effect),
    ]
    for label, value in fields:
        lines.append(f"{Colors.CYAN}{label}:{Colors.RESET} {value}")

    lines.append(f"{Colors.DIM}{'-' * 40}{Colors.RESET}")
    for block in detail.blocks:
        if isinstance(block, Table):
            lines.append(format_table(block))
        else:
            lines.append(block.text)
        lines.append("")

    if detail.footer:
        lines.append(f"{Colors.DIM}{detail.footer}{Colors.RESET}")
    return "\n".join(lines).rstrip()


def run_command(browser: SpellBrowser, line: str) -> str | None:
    """Apply one interactive command and return the text to show.

    Returns None when the user asked to quit.
    """
    try:
        parts = shlex.split(line)
    except ValueError as e:
        return f"{Colors.RED}Error: {e}{Colors.RESET}"
    if not parts:
        return ""

    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit", "q"):
        return None
    if command == "help":
        return HELP_TEXT
    if command == "classes":
        return format_classes(browser)
    if command == "sources":
        return format_sources(browser)
    if command == "list":
        return format_level_groups(browser.level_groups)
    if command == "class":
        name = " ".join(args)
        browser.pick_class(None if name in ("", "-") else name)
        return f"Class: {browser.selected_class or '(none)'}"
    if command == "source":
        if len(args) < 2 or args[0] not in ("on", "off"):
            return f"{Colors.RED}Usage: source on|off NAME{Colors.RESET}"
        browser.toggle_source(" ".join(args[1:]), args[0] == "on")
        return format_sources(browser)
    if command == "open":
        try:
            spell = browser.open_spell(" ".join(args))
        except SpellNotVisibleError as e:
            return f"{Colors.RED}{e}{Colors.RESET}"
        return format_spell_detail(build_spell_detail(spell))
    if command == "close":
        browser.close_popup()
        return ""

    return f"{Colors.RED}Unknown command: {command}{Colors.RESET} (type 'help')"


def interactive_mode(browser: SpellBrowser) -> None:
    """Browse the catalog interactively until the user quits."""
    print("Spell Browser")
    print("Type 'help' for commands, 'quit' to exit.\n")
    print(format_level_groups(browser.level_groups))
    print()

    while True:
        try:
            line = input("spells> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break

        output = run_command(browser, line)
        if output is None:
            print("Goodbye!")
            break
        if output:
            print(f"{output}\n")
