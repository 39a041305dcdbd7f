"""命令行入口"""
import argparse
import json
import random
import sys
from typing import List, Optional

from .config import settings
from .dice import DiceDescriber, DiceError, DiceParser, DiceRoller, check_limits
from .logging import get_logger, log_operation, setup_logging

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(prog="miniroll", description="Dice notation roller")
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="enable DEBUG logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    roll_parser = subparsers.add_parser("roll", help="roll dice, e.g. 4d6kH3")
    roll_parser.add_argument("notation", nargs="?", default=None, help="dice notation")
    roll_parser.add_argument("--times", "-t", type=int, default=1, help="number of rolls")
    roll_parser.add_argument("--seed", type=int, default=None, help="seed for reproducible rolls")
    roll_parser.add_argument("--json", action="store_true", help="print results as JSON")

    describe_parser = subparsers.add_parser("describe", help="describe a dice notation")
    describe_parser.add_argument("notation", help="dice notation")
    describe_parser.add_argument("--short", "-s", action="store_true", help="canonical notation only")

    serve_parser = subparsers.add_parser("serve", help="run the HTTP API")
    serve_parser.add_argument("--host", default=settings.web_host)
    serve_parser.add_argument("--port", type=int, default=settings.web_port)

    return parser


@log_operation("roll")
def cmd_roll(notation: str, times: int = 1, seed: Optional[int] = None, as_json: bool = False) -> str:
    """执行骰点，返回输出文本"""
    spec = DiceParser.parse(notation)
    check_limits(spec, times, settings.max_dice, settings.max_times)

    rng = random.Random(seed) if seed is not None else None
    results = DiceRoller(rng).roll_many(notation, times)

    if as_json:
        return json.dumps({"results": [r.to_dict() for r in results]})
    return "\n".join(str(r) for r in results)


@log_operation("describe")
def cmd_describe(notation: str, short: bool = False) -> str:
    """生成描述文本"""
    if short:
        return DiceDescriber.describe_short(notation)
    return DiceDescriber.describe(notation)


def cmd_serve(host: str, port: int) -> None:
    """启动 Web 服务"""
    import uvicorn

    from .web import create_app

    logger.info(f"Web 服务启动: http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="warning")


def main(argv: Optional[List[str]] = None) -> int:
    """主函数，返回退出码"""
    args = build_parser().parse_args(argv)

    # 命令行 --debug 优先于配置
    log_level = "DEBUG" if args.debug else settings.log_level
    setup_logging(
        level=log_level,
        log_path=settings.log_path,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )

    try:
        if args.command == "roll":
            output = cmd_roll(
                args.notation or settings.default_notation,
                times=args.times,
                seed=args.seed,
                as_json=args.json,
            )
        elif args.command == "describe":
            output = cmd_describe(args.notation, short=args.short)
        else:
            cmd_serve(args.host, args.port)
            return 0
    except DiceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(output)
    return 0


def run():
    """console script 入口"""
    sys.exit(main())


if __name__ == "__main__":
    run()
