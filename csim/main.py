#! /usr/bin/env python3
import argparse
import logging
import sys

from csim.cache import ConfigurationError, ResourceError
from csim.simulator import Simulator
from csim.summary import printSummary
from csim.trace import TraceError, openTrace, parseTrace, replay


def printUsage(prog):
    print("Usage: %s [-hv] -s <num> -E <num> -b <num> -t <file>"%prog)
    print("Options:")
    print("  -h         Print this help message.")
    print("  -v         Optional verbose flag.")
    print("  -s <num>   Number of set index bits.")
    print("  -E <num>   Number of lines per set.")
    print("  -b <num>   Number of block offset bits.")
    print("  -t <file>  Trace file.")
    print("")
    print("Examples:")
    print("  linux>  %s -s 4 -E 1 -b 4 -t traces/yi.trace"%prog)
    print("  linux>  %s -v -s 8 -E 2 -b 4 -t traces/yi.trace"%prog)


class UsageParser(argparse.ArgumentParser):

    def error(self, message):
        print("%s: %s"%(self.prog, message))
        printUsage(self.prog)
        sys.exit(1)


def parseArgs(argv=None):
    parser = UsageParser(prog="csim", add_help=False)
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-s", dest="setBits", type=int, default=0)
    parser.add_argument("-E", dest="associativity", type=int, default=0)
    parser.add_argument("-b", dest="blockBits", type=int, default=0)
    parser.add_argument("-t", dest="traceFile", default=None)
    args = parser.parse_args(argv)

    if args.help:
        printUsage(parser.prog)
        sys.exit(0)

    if args.setBits < 1 or args.associativity < 1 or args.blockBits < 1 or args.traceFile is None:
        parser.error("Missing required command line argument")
    return args


def printRecord(record, outcomes):
    print("%s %x,%d %s"%(record.op, record.address, record.size, " ".join(o.value for o in outcomes)))


def main(argv=None):
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    args = parseArgs(argv)

    try:
        simulator = Simulator(args.setBits, args.associativity, args.blockBits)
        with openTrace(args.traceFile) as f:
            replay(simulator, parseTrace(f), printRecord if args.verbose else None)
    except (ConfigurationError, ResourceError, TraceError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print("%s: %s"%(args.traceFile, e.strerror or e), file=sys.stderr)
        sys.exit(1)

    printSummary(simulator.stats)
    return 0


if __name__ == '__main__':
    sys.exit(main())
