import argparse
import logging
import os
import sys

from voc import __version__, config
from voc.database import check_database, make_rng, pick_random_file, resolve_vocab_file
from voc.errors import UsageError, VocError
from voc.modes import run_choice, run_quiz, run_random
from voc.records import read_entries
from voc.screen import Screen, paint

logger = logging.getLogger(__name__)

USAGE = """\
Usage : voc -<option> <optarg> <voc_db>
where <voc_db> is a dir containing all voc files

interactive:
   voc -(c|q) <file> <voc_db>
   where -c for choice, -q for quiz from voc file <file>
   which must be in relative path to voc_db (not absolute!)

non-interactive:
   voc -r <n> <voc_db>
   prints n number of randoms definitions
   from any voc file in voc_db
"""


class VocArgumentParser(argparse.ArgumentParser):
    """Reports bad arguments with the full usage text and exit status 1."""

    def error(self, message):
        self.exit(config.EXIT_FAILURE,
                  f"{paint('Invalid format', 'error')}: {message}\n{USAGE}")


def count_arg(value):
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {value!r}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {count}")
    return count


def build_parser():
    parser = VocArgumentParser(
        prog="voc",
        usage="voc -(c|q) <file> <voc_db> | voc -r <n> <voc_db>",
        description="Study word:definition vocabulary files.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-c", dest="choice", metavar="FILE",
                      help="choose words by index from FILE, relative to the db")
    mode.add_argument("-q", dest="quiz", metavar="FILE",
                      help="quiz every word of FILE, relative to the db")
    mode.add_argument("-r", dest="random", metavar="N", type=count_arg,
                      help="print N random definitions from a random file in the db")
    parser.add_argument("voc_db", help="directory containing the vocabulary files")
    parser.add_argument("--shuffle", action="store_true",
                        help="quiz the words in random order")
    parser.add_argument("--retry", action="store_true",
                        help="in the quiz, answer p to see a word again later")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging on stderr")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def setup_logging(verbose):
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def keep_raw_bytes(stream):
    """Let undecodable bytes read from vocabulary files be written back as-is."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def silence_stdout():
    # the reader is gone; keep the interpreter's exit flush from failing again
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def run(args, read_line=input, out=None):
    out = out or sys.stdout
    if (args.shuffle or args.retry) and args.quiz is None:
        raise UsageError("--shuffle and --retry only apply to the quiz (-q)")

    check_database(args.voc_db)
    rng = make_rng()

    if args.random is not None:
        name = pick_random_file(args.voc_db, rng)
    else:
        name = args.choice if args.choice is not None else args.quiz
    path = resolve_vocab_file(args.voc_db, name)
    entries = read_entries(path)

    if args.choice is not None:
        run_choice(entries, read_line=read_line, out=out)
    elif args.quiz is not None:
        run_quiz(entries, read_line=read_line, out=out, screen=Screen(out),
                 shuffle=args.shuffle, retry=args.retry, rng=rng)
    else:
        run_random(entries, args.random, rng, out=out)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    keep_raw_bytes(sys.stdout)
    keep_raw_bytes(sys.stderr)

    try:
        config.validate()
        setup_logging(args.verbose)
        run(args)
    except UsageError as e:
        logger.debug("usage error", exc_info=True)
        sys.stderr.write(f"{paint('Invalid format', 'error')}: {e}\n{USAGE}")
        return config.EXIT_FAILURE
    except VocError as e:
        logger.debug("fatal error", exc_info=True)
        print(paint(f"voc: {e}", 'error'), file=sys.stderr)
        return config.EXIT_FAILURE
    except BrokenPipeError:
        silence_stdout()
        return config.EXIT_FAILURE
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
