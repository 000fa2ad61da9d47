import argparse
import logging
import sys

from pathcomplete.exceptions import ConfigurationError
from pathcomplete.use_cases.suggestions.rescan_boundary import extract_dir


def _render_pretty(text: str, suggestions: list[str], boundary: str) -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(soft_wrap=True)
    body = Text()
    if suggestions:
        for i, s in enumerate(suggestions):
            if i:
                body.append("\n")
            body.append(s, style="bold cyan")
    else:
        body.append("no suggestions", style="dim")
    console.print(
        Panel(
            body,
            title=text,
            subtitle=f"boundary: {boundary or '-'}",
            box=box.ROUNDED,
            border_style="magenta",
            expand=False,
        )
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pathcomplete",
        description="Print directory completions for a partially typed path.",
        epilog=(
            "Environment settings (PATHCOMPLETE_HOME, PATHCOMPLETE_MAX_RESULTS, "
            "LOG_LEVEL) are validated first and an invalid value exits with code 2; "
            "--home and --max then override the valid values."
        ),
    )
    parser.add_argument("input", help="Path typed so far ('~/' allowed)")
    parser.add_argument(
        "--home",
        default=None,
        help="Home directory substituted for '~/' (default: PATHCOMPLETE_HOME or ~)",
    )
    parser.add_argument(
        "--max",
        dest="max_results",
        type=int,
        default=None,
        help="Maximum number of suggestions (default: PATHCOMPLETE_MAX_RESULTS)",
    )
    parser.add_argument(
        "--boundary",
        action="store_true",
        help="Print the re-scan boundary of the input instead of suggestions",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render suggestions in a panel with colors",
    )

    args = parser.parse_args(argv)

    try:
        from pathcomplete.config.settings import settings, validate_home_directory

        home = settings.home_directory
        if args.home is not None:
            home = validate_home_directory(args.home, "--home")
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    boundary = extract_dir(args.input, home)
    if args.boundary:
        print(boundary)
        return 0

    from pathcomplete.container import container

    max_results = (
        settings.max_results if args.max_results is None else args.max_results
    )
    suggestions = container.get_list_suggestions_use_case().execute(
        args.input, home, max_results
    )
    if args.pretty:
        _render_pretty(args.input, suggestions, boundary)
    else:
        for s in suggestions:
            print(s)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
