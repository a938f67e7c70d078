#!/usr/bin/env python3
"""
Command line entry point: build a tree from an expression, optionally optimize
it, write its renderings, then do the same for its derivative.
"""
import argparse
import subprocess
import sys
from typing import List, Optional

from .config import RunConfig
from .errors import ExpressionError
from .expression_tree import Expression, VariableRegistry, default_pipeline, write_outputs
from .logging_system import LogLevel, configure_logging, log_critical, log_milestone, log_stage


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(
        prog="symbolic-diff",
        description="Build, differentiate and render an arithmetic expression")
    parser.add_argument("expression", help="Infix expression, e.g. 'x*sin(x) + 2^x'")
    parser.add_argument("--variable", "-v", default="x", help="Differentiation variable (default: x)")
    parser.add_argument("--optimized", action="store_true",
                        help="Remove unary plus and double negation before rendering")
    parser.add_argument("--output", "-o", default="expression",
                        help="Output file stem; the derivative uses '<stem>-derivative'")
    parser.add_argument("--render", action="store_true", help="Also render PNG files with Graphviz 'dot'")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log intermediate trees and debug details")
    verbosity.add_argument("--quiet", action="store_true", help="Only log errors")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = LogLevel.VERBOSE
    elif args.quiet:
        log_level = LogLevel.SILENT
    else:
        log_level = LogLevel.MODERATE

    try:
        return RunConfig(
            expression=args.expression,
            variable=args.variable,
            optimized=args.optimized,
            output_stem=args.output,
            render_png=args.render,
            log_level=log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        parser.error(str(e))


def run(config: RunConfig) -> int:
    configure_logging(config.log_level, log_to_file=config.log_file is not None,
                      log_file_path=config.log_file)
    pipeline = default_pipeline() if config.optimized else None

    try:
        expression = Expression.from_string(config.expression, VariableRegistry())
        log_stage("parsed", expression.to_string())
        if pipeline is not None:
            expression = expression.optimize(pipeline)
            log_stage("optimized", expression.to_string())
        write_outputs(expression.root, config.output_stem, config.render_png)

        derivative = expression.differentiate(config.variable)
        log_stage("derivative", derivative.to_string())
        if pipeline is not None:
            derivative = derivative.optimize(pipeline)
            log_stage("optimized derivative", derivative.to_string())
        write_outputs(derivative.root, config.derivative_stem, config.render_png)
    except ExpressionError as e:
        log_critical(f"Invalid expression: {e}")
        return 1
    except (subprocess.CalledProcessError, OSError) as e:
        log_critical(f"Could not write outputs: {e}")
        return 1

    print(f"f = {expression.to_string()}")
    print(f"df/d{config.variable} = {derivative.to_string()}")
    log_milestone(f"Differentiated with respect to {config.variable}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
