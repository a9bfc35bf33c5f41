from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .binary.reader import inspect_offset, iter_numbers, load_bytes, read_number
from .config import SizedNumConfig
from .exceptions import SizedNumberError, UnsupportedRepresentationError
from .formatters.generic import PRESETS, pretty_formatter
from .models.field import NumberField
from .models.reader import GenericReader

logger = logging.getLogger(__name__)


def _offset(text: str) -> int:
    """Offsets may be written in any Python integer base: 16, 0x10, 0o20."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid offset {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"offset must not be negative, got {value}")
    return value


def _field_from_args(args, config: SizedNumConfig) -> NumberField:
    if args.field:
        field = NumberField.model_validate_json(Path(args.field).read_text(encoding="utf-8"))
        logger.debug(f"Loaded field {field.reader} / {field.formatter.style} from {args.field}")
        return field
    reader = GenericReader.parse(args.type or config.read.default_type)
    formatter = pretty_formatter(args.format or config.display.default_style)
    return NumberField(reader=reader, formatter=formatter)


def _count(args, config: SizedNumConfig) -> int | None:
    if args.count is None:
        return None
    if args.count > config.read.max_values:
        logger.warning(f"Capping --count {args.count} to {config.read.max_values}")
        return config.read.max_values
    return args.count


def cmd_read(args, config: SizedNumConfig):
    field = _field_from_args(args, config)
    number = read_number(args.input, field.reader, args.offset)
    if args.json:
        print(number.model_dump_json(indent=2))
    else:
        print(field.formatter.render(number))


def cmd_dump(args, config: SizedNumConfig):
    field = _field_from_args(args, config)
    data = load_bytes(args.input)
    count = _count(args, config)
    emitted = 0
    for off, number in iter_numbers(data, field.reader, offset=args.offset, count=count, stride=args.stride):
        print(f"{off:#010x}\t{field.formatter.render(number)}")
        emitted += 1
        if count is None and emitted >= config.read.max_values:
            logger.warning(f"Stopped after {emitted} values (max_values)")
            break
    logger.info(f"Decoded {emitted} {field.reader} value(s) from {args.input}")


def cmd_inspect(args, config: SizedNumConfig):
    formatter = pretty_formatter(args.format or config.display.default_style)
    readings = inspect_offset(args.input, args.offset)
    if not readings:
        logger.warning(f"No bytes left at offset {args.offset:#x}")
    for name, number in readings.items():
        try:
            text = formatter.render(number)
        except UnsupportedRepresentationError:
            # floats have no hex/octal/binary form
            text = "-"
        print(f"{name:<7} {text}")


def cmd_plot(args, config: SizedNumConfig):
    from .viz import plot_values
    field = _field_from_args(args, config)
    data = load_bytes(args.input)
    count = _count(args, config)
    if count is None:
        # no explicit count: plot what fits
        avail, step = len(data) - args.offset, args.stride or field.reader.size
        fits = (avail - field.reader.size) // step + 1 if avail >= field.reader.size else 0
        count = min(config.read.max_values, fits)
    values = list(iter_numbers(data, field.reader, offset=args.offset, count=count, stride=args.stride))
    plot_values(values, title=f"{Path(str(args.input)).name} ({field.reader})")


def _add_common(sp: argparse.ArgumentParser):
    sp.add_argument("input", help="Path to a binary file")
    sp.add_argument("-t", "--type", help="Number type, e.g. u8, u32le, i16be, f64 (default from config)")
    sp.add_argument("-o", "--offset", type=_offset, default=0, help="Byte offset to start at (default 0)")
    sp.add_argument("-f", "--format", choices=list(PRESETS), help="Formatter preset (default from config)")
    sp.add_argument("--field", help="JSON file holding a serialized NumberField; overrides --type/--format")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sizednum", description="Decode and display fixed-width numbers from binary data")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("read", help="decode and print one value")
    _add_common(sp)
    sp.add_argument("--json", action="store_true", help="Print the decoded number as JSON")
    sp.set_defaults(func=cmd_read)

    sp = sub.add_parser("dump", help="decode consecutive values, one per line")
    _add_common(sp)
    sp.add_argument("-n", "--count", type=int, default=None, help="Number of values (default: until end of data)")
    sp.add_argument("--stride", type=int, default=None, help="Bytes between values (default: the type's size)")
    sp.set_defaults(func=cmd_dump)

    sp = sub.add_parser("inspect", help="show the bytes at one offset as every number type")
    sp.add_argument("input", help="Path to a binary file")
    sp.add_argument("-o", "--offset", type=_offset, default=0, help="Byte offset to inspect (default 0)")
    sp.add_argument("-f", "--format", choices=list(PRESETS), help="Formatter preset (default from config)")
    sp.set_defaults(func=cmd_inspect)

    sp = sub.add_parser("plot", help="minimal verification plot of consecutive values")
    _add_common(sp)
    sp.add_argument("-n", "--count", type=int, default=None, help="Number of values (default: until end of data)")
    sp.add_argument("--stride", type=int, default=None, help="Bytes between values (default: the type's size)")
    sp.set_defaults(func=cmd_plot)

    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(level=(logging.DEBUG if ns.verbose else logging.INFO))
    if not hasattr(ns, "func"):
        p.print_help()
        return 2

    try:
        config = SizedNumConfig.from_env()
        ns.func(ns, config)
        return 0
    except Exception as e:
        match e:
            case SizedNumberError() | FileNotFoundError() | PermissionError():
                logger.error(str(e))
            case ValueError():
                logger.error(f"Invalid input: {e}")
            case OSError():
                logger.error(f"OS error while processing {ns.input}: {e}")
            case _:
                logger.error(f"Unexpected error while processing {ns.input}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
