import argparse
import json
import sys
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional, TYPE_CHECKING

from . import __version__
from .errors import QuantileError
from .logutil import LEVELS, get_logger, set_level
from .quantile import quantile_seq, quantiles

if TYPE_CHECKING:  # pragma: no cover - typing only
    from rich.console import Console as _Console
else:  # runtime optional import
    try:  # noqa: SIM105
        from rich.console import Console as _Console  # type: ignore
    except Exception:  # noqa: BLE001
        _Console = None  # type: ignore

ConsoleType = Optional["_Console"]


def _parse_number(token: str, use_decimal: bool) -> Any:
    if use_decimal:
        try:
            return Decimal(token)
        except InvalidOperation as exc:
            raise ValueError(token) from exc
    return float(token)


def read_values(text: str, use_decimal: bool = False) -> List[Any]:
    """Parse a JSON (nested) array, or whitespace separated numbers.

    Tokens that are not numbers are skipped with a warning.
    """
    stripped = text.strip()
    if stripped.startswith("["):
        if use_decimal:
            return json.loads(stripped, parse_float=Decimal, parse_int=Decimal)
        return json.loads(stripped)
    values: List[Any] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            try:
                values.append(_parse_number(token, use_decimal))
            except ValueError:
                get_logger("cli").warning("skipped non-numeric token %r on line %d", token, lineno)
    return values


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as fh:
        return fh.read()


def _maybe_console(args: argparse.Namespace) -> ConsoleType:
    if getattr(args, "no_color", False):
        return None
    if _Console is None:
        return None
    # force_terminal ensures ANSI codes even when output is being captured (for tests)
    return _Console(color_system="truecolor", stderr=False, force_terminal=True)


def _format(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return json.dumps(value, default=str)
    return str(value)


def cmd_quantile(args: argparse.Namespace) -> int:
    try:
        text = _read_source(args.file)
    except OSError as exc:
        print(f"[quantseq] cannot read input: {exc}", file=sys.stderr)
        return 2
    try:
        data = read_values(text, use_decimal=args.decimal)
    except json.JSONDecodeError as exc:
        print(f"[quantseq] malformed JSON input: {exc}", file=sys.stderr)
        return 2

    probs: Optional[List[Any]] = None
    try:
        if args.count is not None:
            count: Any = Decimal(args.count) if args.decimal else args.count
            result = quantiles(data, count, args.sorted, axis=args.axis)
            labels = [f"{i}/{args.count + 1}" for i in range(1, args.count + 1)]
        else:
            probs = [_parse_number(p, args.decimal) for p in (args.prob or ["0.5"])]
            prob_arg: Any = probs[0] if len(probs) == 1 else probs
            result = quantile_seq(data, prob_arg, is_sorted=args.sorted, axis=args.axis)
            labels = [str(p) for p in probs]
    except QuantileError as exc:
        print(f"[quantseq] error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"[quantseq] invalid probability: {exc}", file=sys.stderr)
        return 2

    if args.json:
        payload = {"labels": labels, "axis": args.axis, "sorted": args.sorted, "result": result}
        with open(args.json, "w", encoding="utf-8") as oh:
            json.dump(payload, oh, indent=2, default=str)
        print(f"Wrote JSON results to {args.json}")
        return 0

    console = _maybe_console(args)
    if args.axis is not None or not isinstance(result, list):
        rows = [("" if args.axis is not None or len(labels) != 1 else labels[0], result)]
    else:
        rows = list(zip(labels, result))
    for label, value in rows:
        prefix = f"q({label}) = " if label else ""
        if console is not None:
            console.print(f"[cyan]{prefix}[/cyan][bold]{_format(value)}[/bold]", highlight=False)
        else:
            print(f"{prefix}{_format(value)}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:  # pragma: no cover - integration feature
    try:
        import uvicorn
        from .service import build_app
    except Exception:  # noqa: BLE001
        print("'serve' requires fastapi and uvicorn. Install with `pip install quantseq[server]`.", file=sys.stderr)
        return 2
    uvicorn.run(build_app(), host=args.host, port=args.port, log_level="info")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quantseq", description="Quantiles by partial selection.")
    # Global --version (argparse will exit 0 before validating subcommands)
    parser.add_argument(
        "--version",
        action="version",
        version=f"quantseq {__version__}",
        help="Show version and exit",
    )
    parser.add_argument(
        "--log-level",
        choices=LEVELS,
        default="warning",
        help="Threshold for quantseq log messages on stderr (default warning)",
    )
    sub = parser.add_subparsers(dest="cmd")

    quantile_parser = sub.add_parser("quantile", help="Compute quantiles of numbers in a file (or - for stdin)")
    quantile_parser.add_argument("file", help="Whitespace separated numbers or a JSON (nested) array")
    group = quantile_parser.add_mutually_exclusive_group()
    group.add_argument("--prob", nargs="+", help="One or more probabilities in [0,1] (default 0.5)")
    group.add_argument("--count", type=int, help="Number of evenly spaced quantiles i/(N+1)")
    quantile_parser.add_argument("--sorted", action="store_true", help="Input is already ascending (not verified)")
    quantile_parser.add_argument("--axis", type=int, help="Reduce along this axis of a nested JSON array")
    quantile_parser.add_argument("--decimal", action="store_true", help="Parse numbers and probabilities as Decimal")
    quantile_parser.add_argument("--json", help="Write JSON results to this path")
    quantile_parser.add_argument("--no-color", action="store_true", help="Disable colorized output even if rich present")
    quantile_parser.set_defaults(func=cmd_quantile)

    # Bench subcommand (lightweight wrapper around bench/benchmark.py)
    bench_parser = sub.add_parser("bench", help="Compare partial selection against a full sort")
    bench_parser.add_argument("--size", type=int, default=100000, help="Number of random values")
    bench_parser.add_argument("--repeat", type=int, default=5, help="Timed repetitions")
    bench_parser.add_argument("--seed", type=int, default=0)

    def _cmd_bench(a: argparse.Namespace) -> int:  # pragma: no cover - covered via integration test
        try:
            from bench.benchmark import run
        except Exception as exc:  # noqa: BLE001
            print(f"[quantseq] bench harness import failed: {exc}", file=sys.stderr)
            return 2
        run(a.size, a.repeat, a.seed)
        return 0

    bench_parser.set_defaults(func=_cmd_bench)

    serve_parser = sub.add_parser("serve", help="Run HTTP service (requires quantseq[server])")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=8080)
    serve_parser.set_defaults(func=cmd_serve)

    # Simple 'version' subcommand for shells/users preferring explicit command
    version_parser = sub.add_parser("version", help="Show version and exit")
    version_parser.set_defaults(func=lambda _: (print(f"quantseq {__version__}"), 0)[1])

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    set_level(args.log_level)
    if not getattr(args, "cmd", None):  # No subcommand provided
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
