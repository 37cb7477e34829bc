"""CLI for PassGauge: analyze, generate, passphrase, watch (live analysis of stdin)."""

import argparse
import json
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import load_config
from .debounce import AnalysisDebouncer
from .estimator import SLOW_HASHING, CRACK_SCENARIOS
from .evaluator import analyze_password, crack_time_percentage, security_level
from .generator import generate_passphrase, generate_random_password

logger = logging.getLogger("passgauge")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def show_analysis(result) -> None:
    if result.char_count == 0:
        print("[grey50]Empty password — nothing to analyze.[/grey50]")
        return
    level = security_level(result)
    header = f"Score: {result.score} / 4 — [{result.color}]{result.label}[/{result.color}]"
    body = (
        f"Entropy: {result.entropy} bits\n"
        f"Length: {result.char_count} characters\n"
        f"Level: [{level.color}]{level.label}[/{level.color}] — {level.description}\n"
        f"Time to crack (slow hashing): {result.crack_times_display.get(SLOW_HASHING, '?')} "
        f"({crack_time_percentage(result.crack_time_seconds.get(SLOW_HASHING, 0)):.0f}% of timeline)"
    )
    print(Panel(body, title=header))

    times = Table(show_header=True, header_style="bold magenta")
    times.add_column("Attack scenario")
    times.add_column("Estimated time")
    for k in CRACK_SCENARIOS:
        times.add_row(k.replace("_", " "), result.crack_times_display.get(k, "?"))
    print(times)

    if result.feedback.warning:
        print(f"[bold yellow]Warning:[/bold yellow] {escape(result.feedback.warning)}")
    if result.feedback.suggestions:
        print("[bold]Suggestions:[/bold]")
        for s in result.feedback.suggestions:
            print(f" • {escape(s)}")
    if result.patterns:
        # dedupe patterns while preserving order
        print("[bold]Patterns:[/bold] " + ", ".join(dict.fromkeys(result.patterns)))

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Standard")
    table.add_column("Result")
    table.add_column("Reason")
    for c in result.compliance:
        verdict = "[green]PASS[/green]" if c.passed else "[red]FAIL[/red]"
        table.add_row(c.name, verdict, c.reason)
    print(table)


def cmd_analyze(args):
    result = analyze_password(args.password)
    if args.json:
        sys.stdout.write(json.dumps(result.as_dict(), indent=2) + "\n")
        return
    show_analysis(result)


def cmd_generate(args):
    try:
        for i in range(args.copies):
            pw = generate_random_password(args.length)
            print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
            if args.analyze:
                show_analysis(analyze_password(pw))
    except ValueError as e:
        print(f"[red]Failed to generate password: {e}[/red]")
        return 1


def cmd_passphrase(args):
    try:
        for i in range(args.copies):
            pp = generate_passphrase(args.words)
            print(f"[bold green]Passphrase #{i+1}:[/bold green] {escape(pp)}")
            if args.analyze:
                show_analysis(analyze_password(pp))
    except ValueError as e:
        print(f"[red]Failed to generate passphrase: {e}[/red]")
        return 1


def cmd_watch(args):
    """Analyze candidates read line by line from stdin; stale candidates are skipped."""
    delay = args.delay_ms / 1000.0
    debouncer = AnalysisDebouncer(show_analysis, delay=delay)
    try:
        for line in sys.stdin:
            debouncer.submit(line.rstrip("\r\n"))
    except KeyboardInterrupt:
        debouncer.cancel()
        return 130
    # input closed: whatever is still waiting is the latest candidate
    debouncer.flush()


def main(argv=None):
    cfg = load_config()

    parser = argparse.ArgumentParser(prog="passgauge")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser("analyze", help="Analyze a password and check it against standards")
    an.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    an.add_argument("--json", action="store_true", help="Print the analysis as JSON")
    an.set_defaults(func=cmd_analyze)

    gen = sub.add_parser("generate", help="Generate random passwords")
    gen.add_argument("--length", type=int, default=int(cfg["random_length"]), help="Password length")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--analyze", action="store_true", help="Analyze each generated password")
    gen.set_defaults(func=cmd_generate)

    pp = sub.add_parser("passphrase", help="Generate hyphen-joined passphrases")
    pp.add_argument("--words", type=int, default=int(cfg["passphrase_words"]), help="Number of words")
    pp.add_argument("--copies", type=int, default=1, help="How many passphrases to generate")
    pp.add_argument("--analyze", action="store_true", help="Analyze each generated passphrase")
    pp.set_defaults(func=cmd_passphrase)

    w = sub.add_parser("watch", help="Live analysis of passwords typed/piped on stdin")
    w.add_argument("--delay-ms", type=int, default=int(cfg["debounce_ms"]), help="Quiet period before analyzing")
    w.set_defaults(func=cmd_watch)

    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else str(cfg["log_level"]).upper())
    logger.debug("running %s", args.cmd)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
