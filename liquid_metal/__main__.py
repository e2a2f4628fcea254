"""Command-line interface."""
import argparse

from liquid_metal.config import SimulationConfig, load_config
from liquid_metal.demo import run_demo
from liquid_metal.logging_config import setup_logging


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="liquid_metal",
                                     description="Interactive liquid metal surface.")
    parser.add_argument("--config", help="JSON file overriding the default settings")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", help="also write the log to this file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)
    config = load_config(args.config) if args.config else SimulationConfig()
    run_demo(config)


if __name__ == "__main__":
    main()
