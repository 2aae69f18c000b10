import argparse
import sys
from typing import TextIO

import pandas as pd
from loguru import logger

from .bitwidth import bitwidth_to_interval, interval_to_bitwidth, to_balanced, universe
from .columns import describe_columns
from .common import ArithKind, BitwidthParams, IntervalError
from .config import load_params
from .interval import Interval

DemoResult = tuple[str, str, str]


def demo_results(params: BitwidthParams = BitwidthParams()) -> list[DemoResult]:
    a = Interval(0, 1)
    b = Interval(2, 5)
    c = Interval(7, 7)
    d = Interval(-8, 7)
    f = Interval(25, 178)
    unsigned, signed = ArithKind.UNSIGNED, ArithKind.SIGNED

    return [
        ("add", f"{a} + {b}", str(a + b)),
        ("add", f"{a} + {c}", str(a + c)),
        ("sub", f"{a} - {a}", str(a - a)),
        ("neg", f"neg {a}", str(-a)),
        ("mul", f"{b} * {d}", str(b.mul(d, signed, signed))),
        ("div for unsigned", f"{f} / {b}", str(f.div(b, unsigned, unsigned))),
        ("div for signed", f"{f} / {b}", str(f.div(b, signed, signed))),
        ("mod for unsigned", f"{f} % {b}", str(f.mod(b, unsigned))),
        ("mod for signed", f"{f} % {b}", str(f.mod(b, signed))),
        ("sqrt", f"sqrt {Interval(15, 244)}", str(Interval(15, 244).sqrt())),
        ("abs", f"abs {Interval(-32, 63)}", str(Interval(-32, 63).abs())),
        ("max", f"max {a} , {b}", str(a.max(b))),
        ("min", f"min {a} , {b}", str(a.min(b))),
        ("universe for signed", "universe 8", str(universe(8, signed, params))),
        ("bitwidth_to_interval for unsigned", "11", str(bitwidth_to_interval(11, unsigned, params))),
        ("bitwidth_to_interval for signed", "24", str(bitwidth_to_interval(24, signed, params))),
        ("interval_to_bitwidth for unsigned", str(Interval(0, 1023)), str(interval_to_bitwidth(Interval(0, 1023), unsigned))),
        ("interval_to_bitwidth for signed", str(Interval(-64, 7)), str(interval_to_bitwidth(Interval(-64, 7), signed))),
        ("to_balanced for unsigned", f"balance {Interval(5, 38)}", str(to_balanced(Interval(5, 38), unsigned))),
        ("to_balanced for signed", f"balance {Interval(-65, 121)}", str(to_balanced(Interval(-65, 121), signed))),
    ]


def run_demo(stream: TextIO, params: BitwidthParams = BitwidthParams(), table: bool = False) -> None:
    results = demo_results(params)
    if table:
        df = pd.DataFrame(results, columns=["operation", "operands", "result"])
        stream.write(df.to_string(index=False) + "\n")
    else:
        for operation, operands, result in results:
            stream.write(f"Testing {operation}: {operands} = {result}\n")


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.enable("bitinterval")
    if verbose:
        logger.add(sys.stderr, format="[{level}] {message}", level="DEBUG")
    else:
        logger.add(sys.stderr, format="[{level}] {message}", level="WARNING")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bitinterval", description="Integer interval arithmetic demonstration.")
    parser.add_argument("--table", action="store_true", help="print the results as a table")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--params", metavar="PATH", help="JSON file with bitwidth parameters")
    parser.add_argument("--csv", metavar="PATH", help="describe the integer columns of a CSV file instead")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    try:
        params = load_params(args.params)
        if args.csv is not None:
            logger.debug(f"Loading data from `{args.csv}`.")
            df = pd.read_csv(args.csv)
            sys.stdout.write(describe_columns(df).to_string() + "\n")
        else:
            run_demo(sys.stdout, params, args.table)
    except IntervalError as e:
        logger.error(str(e))
        return 1
    return 0
