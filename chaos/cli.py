import argparse


def parse_args(description, argv=None):
    parser = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--load", type=str, metavar="PATH", help="Path to a YAML settings file.", default=None
    )
    parser.add_argument(
        "--seed", type=int, metavar="N", help="Seed for the random vertex choices.", default=None
    )
    parser.add_argument(
        "--log-file", type=str, metavar="PATH", help="Where to write the log.", default="log.txt"
    )
    return parser.parse_args(argv)
