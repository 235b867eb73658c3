import argparse
import asyncio
import json
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.padding import Padding
from rich.panel import Panel

from any_chat_completions_mcp.config.settings import load_settings
from any_chat_completions_mcp.container import DependencyContainer
from any_chat_completions_mcp.entities.tool import ToolFailure
from any_chat_completions_mcp.exceptions import ConfigurationError


def _print(data: Any, pretty: bool, title: str) -> None:
    if not pretty:
        print(json.dumps(data, ensure_ascii=False, indent=2))
        return
    console = Console(soft_wrap=True)
    if isinstance(data, str):
        console.print(
            Panel(
                Padding(Markdown(data), (0, 1)),
                title=title,
                box=box.ROUNDED,
                border_style="magenta",
                expand=True,
            )
        )
    else:
        console.print_json(data=data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="any-chat",
        description=(
            "Call the configured chat tool once, without an MCP client, and print the reply."
        ),
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--content", help="Text to send to the chat endpoint")
    group.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the advertised tool descriptor and exit",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (Markdown/JSON) with colors",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    use_case = DependencyContainer(settings).get_chat_tool_use_case()

    if args.list_tools:
        _print([use_case.describe_tool().get_details()], args.pretty, "tools")
        return 0

    try:
        outcome = asyncio.run(
            use_case.invoke(use_case.tool_name, {"content": args.content})
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if isinstance(outcome, ToolFailure):
        print(outcome.message, file=sys.stderr)
        return 1

    if args.pretty:
        text = "\n\n".join(item.text or "" for item in outcome.content)
        _print(text, True, settings.display_name)
    else:
        _print(outcome.get_details(), False, settings.display_name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
