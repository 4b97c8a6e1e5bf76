import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from typing import Optional, Sequence

from cowry.domain.services import BatchOperations
from cowry.domain.values import Money, RoundingMode
from cowry.shared.di import Container, get_container
from cowry.shared.logging import configure_logging, get_logger

logger = get_logger("cowry.cli")

OPERATIONS = ("multiply", "divide", "percentage")

SCALERS = {
    "multiply": Money.multiply_with_mode,
    "divide": Money.divide_with_mode,
    "percentage": Money.percentage_with_mode,
}

BATCH_SCALERS = {
    "multiply": BatchOperations.multiply_all_with_mode,
    "divide": BatchOperations.divide_all_with_mode,
    "percentage": BatchOperations.percentage_all_with_mode,
}


def _add_scaling_arguments(parser: ArgumentParser) -> None:
    parser.add_argument("operation", choices=OPERATIONS, help="Scaling operation.")
    parser.add_argument(
        "factor",
        type=float,
        help="Scalar for multiply/divide, percent for percentage.",
    )
    parser.add_argument(
        "--mode",
        type=RoundingMode.from_str,
        choices=list(RoundingMode),
        default=None,
        help="Rounding mode (default: DEFAULT_ROUNDING_MODE setting).",
    )


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="cowry",
        description="Fixed-point money calculator",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    format_parser = subparsers.add_parser("format", help="Format a money JSON record.")
    format_parser.add_argument("money", help='e.g. \'{"amount":500,"currency":{...}}\'')
    format_parser.set_defaults(func=run_format)

    scale_parser = subparsers.add_parser("scale", help="Scale a single money JSON record.")
    scale_parser.add_argument("money", help="Money JSON record.")
    _add_scaling_arguments(scale_parser)
    scale_parser.set_defaults(func=run_scale)

    batch_parser = subparsers.add_parser(
        "batch", help="Scale every record of a JSON array of money records."
    )
    batch_parser.add_argument("items", help="JSON array of money records.")
    _add_scaling_arguments(batch_parser)
    batch_parser.set_defaults(func=run_batch)

    return parser


def _resolve_mode(args: Namespace, container: Container) -> RoundingMode:
    if args.mode is not None:
        return args.mode
    return container.config.default_rounding_mode()


def run_format(args: Namespace, container: Container) -> None:
    money = container.money_codec().decode(args.money)
    print(money.format())


def run_scale(args: Namespace, container: Container) -> None:
    codec = container.money_codec()
    mode = _resolve_mode(args, container)

    money = codec.decode(args.money)
    result = SCALERS[args.operation](money, args.factor, mode)

    logger.info(
        "money_scaled",
        operation=args.operation,
        factor=args.factor,
        mode=str(mode),
        amount=money.amount,
        result=result.amount,
    )
    print(codec.encode(result))


def run_batch(args: Namespace, container: Container) -> None:
    codec = container.money_codec()
    mode = _resolve_mode(args, container)

    batch = container.batch_operations(codec.decode_many(args.items))
    result = BATCH_SCALERS[args.operation](batch, args.factor, mode)

    logger.info(
        "batch_scaled",
        operation=args.operation,
        factor=args.factor,
        mode=str(mode),
        count=len(result),
    )
    print(codec.encode_many(result))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    container = get_container()
    configure_logging(
        log_level=container.config.log_level(),
        json_logs=container.config.json_logs(),
    )

    logger.debug("command_starting", command=args.command)

    try:
        args.func(args, container)
    except Exception as e:
        logger.error(
            "command_failed",
            command=args.command,
            error=str(e),
        )
        sys.exit(1)

    logger.debug("command_completed", command=args.command)
    sys.exit(0)


if __name__ == "__main__":
    main()
