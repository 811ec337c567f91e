import argparse

from data_generation import NameTableGenerator
from number_names import (
    NumberToNameConverter,
    TableUnitNameRetriever,
    is_supported,
    supported_values,
)


def print_spelling(converter, value):
    name = converter.get_name(value)
    print(f"Number: {value}")
    print(f"Name: {name}")
    print(f"Length: {len(name)}")
    if not is_supported(value):
        print("Note: only the leading part of this number is named.")


def print_table(converter):
    for value in supported_values():
        print(f"{value}: {converter.get_name(value)}")


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)
    converter = NumberToNameConverter(TableUnitNameRetriever())

    if args.spell is not None:
        try:
            print_spelling(converter, args.spell)
        except ValueError as exc:
            parser.error(str(exc))
        return

    if args.table:
        print_table(converter)
        return

    if args.generate_data:
        NameTableGenerator(output_dir=args.output_dir, converter=converter).generate_all()
        return

    parser.print_help()


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Spell out numbers below 10000 as English names.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=int,
        help="Print the name of an integer and its length.",
    )
    group.add_argument(
        "--table",
        action="store_true",
        help="Print every fully supported number with its name.",
    )
    group.add_argument(
        "--generate-data",
        action="store_true",
        help="Write the name table to names.csv under the output folder.",
    )
    parser.add_argument(
        "--output-dir",
        default="data",
        help="Output directory for generated data.",
    )
    return parser


if __name__ == "__main__":
    main()
