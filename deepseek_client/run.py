from __future__ import annotations

import argparse
import json

import httpx
from rich.console import Console
from rich.markup import escape

from deepseek_client.client import DeepseekClient
from deepseek_client.config import load_settings
from deepseek_client.enums import DataType, QueryRole
from deepseek_client.errors import ConfigurationError
from deepseek_client.logging_utils import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deepseek-chat")
    parser.add_argument("prompt", type=str, help="user message to send")
    parser.add_argument("--system", type=str, default=None, help="optional system message sent first")
    parser.add_argument("--model", type=str, default=None, help="model name, e.g. deepseek-chat")
    parser.add_argument("--temperature", type=float, default=None)
    parser.add_argument("--stream", action="store_true", help="set the stream flag on the request")
    parser.add_argument(
        "--format",
        choices=[DataType.STRING.value, DataType.JSON.value],
        default=DataType.STRING.value,
        help="print the reply text or the full JSON response",
    )
    parser.add_argument("--log-level", type=str, default=None)
    return parser


def main(argv: list[str] | None = None, *, transport: httpx.BaseTransport | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    err_console = Console(stderr=True)

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        err_console.print(f"[bold red]config error[/bold red]: {escape(str(exc))}")
        return 2
    configure_logging(args.log_level or settings.log_level, console=err_console)

    try:
        client = DeepseekClient.from_settings(settings, transport=transport)
    except ConfigurationError as exc:
        err_console.print(f"[bold red]config error[/bold red]: {escape(str(exc))}")
        return 2

    with client:
        if args.system:
            client.query(args.system, QueryRole.SYSTEM)
        client.query(args.prompt)
        if args.model:
            client.with_model(args.model)
        if args.temperature is not None:
            client.set_temperature(args.temperature)
        if args.stream:
            client.with_stream()
        try:
            content = client.run()
        except httpx.HTTPError as exc:
            err_console.print(f"[bold red]request failed[/bold red]: {escape(str(exc))}")
            return 1
        except ValueError as exc:
            # Non-JSON body, e.g. an event stream when stream is set.
            err_console.print(f"[bold red]invalid response[/bold red]: {escape(str(exc))}")
            return 1

        if args.format == DataType.JSON.value:
            console.print_json(json.dumps(client.get_result().data, ensure_ascii=False))
        else:
            console.print(content, markup=False, highlight=False, soft_wrap=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
