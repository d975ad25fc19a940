import argparse
import logging
import pathlib

import scorecalc


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Record scores in [0, 10] and compute their statistics."
    )
    parser.add_argument("--load", type=pathlib.Path)
    parser.add_argument("--add", nargs="+", type=float, default=[])
    parser.add_argument("--sort", action="store_true")
    parser.add_argument("--show", action="store_true")
    parser.add_argument("--stats", action="store_true")
    parser.add_argument("--save", type=pathlib.Path)
    parser.add_argument("--report_dir", type=pathlib.Path)
    parser.add_argument("--log_file", type=pathlib.Path)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args()

    scorecalc.setup_logger(args.log_file, level=logging.DEBUG if args.verbose else logging.WARNING)

    session = scorecalc.Session(
        load_path=args.load,
        add_values=args.add,
        sort=args.sort,
        show=args.show,
        stats=args.stats,
        save_path=args.save,
        report_dir=args.report_dir,
    )
    session.run()


if __name__ == "__main__":
    main()
