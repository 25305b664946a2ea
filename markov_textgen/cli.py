"""
cli.py - command line front end for markov_textgen

Commands:
- generate: learn a character model from text and print random samples
- chain:    show the learnt transition table as a rich table
- config:   show or change the saved defaults (order, seed, sample count ...)

The model only hands tokens to a callback; reading input and printing the
result lives here.
"""

import argparse
import random
import sys
from collections import Counter
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from markov_textgen import __version__
from markov_textgen.context.tokenizer import char_tokenize, normalize_text
from markov_textgen.core.markov_model import NONWORD, MarkovModel
from markov_textgen.utils.config_manager import DEFAULT_PATH, Config
from markov_textgen.utils.logger_utils import Log

log = Log.get(__name__)

# table renders on stdout, errors on stderr
console = Console()
err_console = Console(stderr=True)


def read_input(source: str) -> str:
    """Read the training text from a path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def build_model(text: str, order, seed=None, strip_newlines=False) -> MarkovModel:
    rng = random.Random(seed)
    tokens = char_tokenize(normalize_text(text, strip_newlines=strip_newlines))
    model = MarkovModel(rng=rng)
    with Log.time_block("chain build"):
        model.init(tokens, order)
    return model


def _show_token(tok) -> str:
    if tok is NONWORD:
        return "[dim]NONWORD[/dim]"
    return escape(repr(tok))


# COMMANDS ------------------------------------------------------------------
def cmd_generate(args, cfg: Config) -> int:
    order = args.order if args.order is not None else cfg.get("order")
    seed = args.seed if args.seed is not None else cfg.get("seed")
    try:
        samples = args.samples if args.samples is not None else cfg.get_int("samples", minimum=1)
        limit = args.max_tokens if args.max_tokens is not None else cfg.get_int("max_tokens")
    except ValueError as e:
        err_console.print(f"[red]config error:[/red] {e}")
        return 2
    strip = args.strip_newlines or cfg.get("strip_newlines")

    model = build_model(read_input(args.input), order, seed=seed, strip_newlines=strip)
    for _ in range(max(samples, 1)):
        # limit 0 means the walk runs until the sentinel
        tokens = model.generate(limit=limit if limit > 0 else None)
        print("".join(tokens))
    return 0


def cmd_chain(args, cfg: Config) -> int:
    order = args.order if args.order is not None else cfg.get("order")
    model = build_model(read_input(args.input), order,
                        strip_newlines=args.strip_newlines or cfg.get("strip_newlines"))
    summary = model.summary()

    table = Table(title=f"order-{summary['order']} chain")
    table.add_column("context")
    table.add_column("successors (count)")
    for context, leaf in _walk(model.get_chain(), summary["order"]):
        counts = Counter(leaf)
        cells = ", ".join(f"{_show_token(t)} x{n}" for t, n in counts.most_common())
        table.add_row(" ".join(_show_token(t) for t in context), cells)
        if args.limit and table.row_count >= args.limit:
            break
    console.print(table)
    console.print(
        f"{summary['contexts']} contexts, {summary['transitions']} transitions, "
        f"{summary['terminal_transitions']} terminal"
    )
    return 0


def _walk(node, depth, prefix=()):
    """Yield (context tuple, leaf list) pairs from the nested chain."""
    if depth == 0:
        yield prefix, node
        return
    for key, child in node.items():
        yield from _walk(child, depth - 1, prefix + (key,))


def cmd_config(args, cfg: Config) -> int:
    if args.key is None:
        cfg.show(console)
        return 0
    if args.value is None:
        err_console.print("[red]usage:[/red] config KEY VALUE")
        return 2
    try:
        cfg.set(args.key, args.value)
    except (KeyError, ValueError) as e:
        err_console.print(f"[red]config error:[/red] {e}")
        return 2
    console.print(f"{args.key} = {cfg.get(args.key)!r}")
    return 0


# PARSER --------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markov-textgen",
                                     description="Generate text with a character-level Markov chain.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=DEFAULT_PATH, help="JSON config file")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="print random text in the style of the input")
    gen.add_argument("input", nargs="?", default="-", help="text file, or - for stdin")
    gen.add_argument("--order", "-k", type=int, default=None, help="context length")
    gen.add_argument("--seed", type=int, default=None, help="seed for repeatable output")
    gen.add_argument("--samples", "-n", type=int, default=None, help="how many lines to generate")
    gen.add_argument("--max-tokens", type=int, default=None, help="cut each sample at this length")
    gen.add_argument("--strip-newlines", action="store_true", help="fold line breaks into spaces")
    gen.set_defaults(func=cmd_generate)

    chain = sub.add_parser("chain", help="show the learnt transition table")
    chain.add_argument("input", nargs="?", default="-", help="text file, or - for stdin")
    chain.add_argument("--order", "-k", type=int, default=None, help="context length")
    chain.add_argument("--limit", type=int, default=0, help="show at most this many contexts")
    chain.add_argument("--strip-newlines", action="store_true", help="fold line breaks into spaces")
    chain.set_defaults(func=cmd_chain)

    conf = sub.add_parser("config", help="show or set saved options")
    conf.add_argument("key", nargs="?", default=None)
    conf.add_argument("value", nargs="?", default=None)
    conf.set_defaults(func=cmd_config)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    try:
        Log.configure(level=args.log_level or cfg.get("log_level"),
                      path=cfg.get("log_path"), use_color=bool(cfg.get("color")))
    except ValueError as e:
        err_console.print(f"[red]config error:[/red] {e}")
        return 2
    log.debug(f"command={args.command} config={cfg.path}")
    try:
        return args.func(args, cfg)
    except OSError as e:
        err_console.print(f"[red]cannot read input:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
