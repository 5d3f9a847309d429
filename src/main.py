"""主入口"""

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from pydantic import ValidationError

from config.settings import Config
from core.exceptions import JokeError, SelectionError
from core.interfaces import Transport
from jokes.base import JokeSource
from services.http_service import HttpService
from services.joke_service import JokeService, available_sources
from utils.logging_config import setup_logging

DESCRIPTION = """jokecli is a command line interface that provides jokes and funny facts
from various sources across the internet. You can get Chuck Norris facts,
dad jokes, and more!"""

PROMPT_TITLE = "What kind of joke would you like?"


def build_parser(sources: list[type[JokeSource]]) -> argparse.ArgumentParser:
    """构建命令行解析器，每个笑话来源对应一个子命令"""
    parser = argparse.ArgumentParser(
        prog="jokecli",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List all supported joke sources and exit",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Do not prompt for a joke source when no command is given",
    )

    subparsers = parser.add_subparsers(dest="command", title="Available Commands")
    for source_cls in sources:
        subparsers.add_parser(
            source_cls.name,
            help=source_cls.summary,
            description=source_cls.description,
        )

    return parser


def prompt_selection(
    sources: list[type[JokeSource]],
    input_func: Optional[Callable[[str], str]] = None,
    output: Optional[TextIO] = None,
) -> str:
    """交互式选择笑话来源

    Args:
        sources: 可选的笑话来源
        input_func: 读取用户输入的函数（默认 input）
        output: 选项输出流（默认 sys.stdout）

    Returns:
        选中的来源名称

    Raises:
        SelectionError: 输入中断或选择无效
    """
    input_func = input_func or input
    output = output or sys.stdout

    print(PROMPT_TITLE, file=output)
    for index, source_cls in enumerate(sources, start=1):
        print(f"  {index}) {source_cls.label}", file=output)

    try:
        answer = input_func("> ").strip()
    except (EOFError, KeyboardInterrupt) as e:
        raise SelectionError(
            f"failed to run interactive mode: {str(e) or type(e).__name__}"
        ) from e

    if answer.isdecimal() and 1 <= int(answer) <= len(sources):
        return sources[int(answer) - 1].name

    for source_cls in sources:
        if answer.lower() == source_cls.name:
            return source_cls.name

    raise SelectionError(f"invalid selection: {answer}")


def main(
    argv: Optional[list[str]] = None, transport: Optional[Transport] = None
) -> int:
    """主入口函数

    Args:
        argv: 命令行参数（默认读取 sys.argv）
        transport: HTTP 传输（默认使用 HttpService）

    Returns:
        进程退出码
    """
    try:
        config = Config()
    except ValidationError as e:
        print(f"invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(level=config.app.log_level)

    sources = available_sources()
    args = build_parser(sources).parse_args(argv)

    # 列出笑话来源
    if args.list:
        print("Supported joke sources:")
        for source_cls in sources:
            print(f"  - {source_cls.name}: {source_cls.summary}")
        return 0

    if args.command is None and (args.no_interactive or not config.app.interactive):
        logging.debug("No command given and interactive mode disabled")
        return 0

    http_service = None
    if transport is None:
        http_service = transport = HttpService(timeout=config.http.timeout)

    try:
        service = JokeService(transport, user_agent=config.http.user_agent)
        name = args.command or prompt_selection(sources)
        print(service.tell(name))
        return 0
    except JokeError as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        if http_service is not None:
            http_service.close()


if __name__ == "__main__":
    sys.exit(main())
