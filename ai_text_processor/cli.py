import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from tabulate import tabulate

from .actions import Action, UnknownActionError, build_pipeline
from .config import APP_TITLE, APP_VERSION, DEFAULT_CASE_MODE
from .formatting import html_to_plain_text, markdown_to_plain_text, to_html_preserving_newlines
from .recognition import detect_clipboard_type, detect_smart_items

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

ACTION_DESCRIPTIONS = {
    Action.DUPLICATES: "Remove duplicate lines",
    Action.CLEANUP: "Clean up spacing and empty lines",
    Action.LIST: "Convert to bulleted list",
    Action.GRAMMAR: "Fix spacing and capitalization",
    Action.CASE: "Change case",
}

INPUT_CONVERTERS = {
    "text": lambda text: text,
    "markdown": markdown_to_plain_text,
    "html": html_to_plain_text,
}


def print_banner():
    err_console.print("=" * 50, style="bold green")
    err_console.print(f"{APP_TITLE} - v{APP_VERSION}", style="bold bright_cyan")
    err_console.print("=" * 50, style="bold green")
    err_console.print("Tidy up clipboard entries and notes: remove duplicates,", style="italic")
    err_console.print("clean spacing, make lists, fix grammar and change case.", style="italic")
    err_console.print()


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def create_argument_parser():
    ap = argparse.ArgumentParser(
        prog="aitextprocessor",
        description="Rule-based clean up for clipboard text and notes.",
    )
    ap.add_argument("input", nargs="?", default="-",
                    help="Input file, or '-' for stdin (default)")
    ap.add_argument("-a", "--action", dest="actions", action="append", default=[],
                    metavar="NAME",
                    help="Action to apply, repeatable: " + ", ".join(a.value for a in Action))
    ap.add_argument("--case-mode", type=int, default=DEFAULT_CASE_MODE,
                    help="Case mode for CASE: 0 upper, 1 lower, 2 title, 3 sentence")
    ap.add_argument("--format", dest="input_format", default="text",
                    choices=sorted(INPUT_CONVERTERS),
                    help="Format of the input text")
    ap.add_argument("--html", action="store_true",
                    help="Wrap the result in HTML that keeps line breaks")
    ap.add_argument("--detect", action="store_true",
                    help="Show clipboard type and smart items instead of transforming")
    ap.add_argument("-o", "--output", default=None,
                    help="Write the result to this file instead of stdout")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="Enable debug logging")
    return ap


def read_input(path):
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def prompt_int(prompt, min_val, max_val):
    while True:
        val = input(prompt).strip()
        if val.isdigit():
            num = int(val)
            if min_val <= num <= max_val:
                return num
        err_console.print(f"[red]Invalid input! Please enter a number between {min_val} and {max_val}.[/]")


def choose_action():
    actions = list(Action)
    err_console.print("Available actions:", style="bold cyan")
    for idx, action in enumerate(actions, 1):
        err_console.print(f"  {idx}. {ACTION_DESCRIPTIONS[action]}")
    idx = prompt_int(f"\nEnter action number (1-{len(actions)}): ", 1, len(actions)) - 1
    return actions[idx]


def render_detection(text):
    clipboard_type = detect_clipboard_type(text)
    rows = [[item.type, item.value, item.label] for item in detect_smart_items(text, clipboard_type)]
    lines = [f"Clipboard type: {clipboard_type.value}"]
    if rows:
        lines.append(tabulate(rows, headers=["Type", "Value", "Action"], tablefmt="github"))
    else:
        lines.append("No smart items found.")
    return "\n".join(lines)


def write_output(result, path):
    if path:
        with open(path, "w", encoding="utf-8") as f:
            f.write(result)
        err_console.print(f"Result saved to '{path}'.", style="green")
    else:
        # raw write, rich would expand tabs and drop control characters
        console.file.write(result + "\n")


def main(argv=None):
    args = create_argument_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        raw = read_input(args.input)
    except OSError as e:
        err_console.print(f"[red]Could not read input:[/] {e}")
        return 1

    text = INPUT_CONVERTERS[args.input_format](raw)
    logger.debug("Read %d chars as %s", len(text), args.input_format)

    if args.detect:
        write_output(render_detection(text), args.output)
        return 0

    actions = args.actions
    if not actions and args.input != "-" and sys.stdin.isatty():
        print_banner()
        actions = [choose_action()]

    try:
        pipeline = build_pipeline(actions, args.case_mode)
    except UnknownActionError as e:
        err_console.print(f"[red]{e}[/]")
        return 1

    result = pipeline(text)
    if args.html:
        result = to_html_preserving_newlines(result)

    try:
        write_output(result, args.output)
    except OSError as e:
        err_console.print(f"[red]Could not write output:[/] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
