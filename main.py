"""Command-line viewer for composite trees stored as JSON.

Usage:
  $ python main.py tree.json --path ROOT/DSID --get RCNM --values Repeat

The document is one {"name", "value", "children"} object or a list of them.
An object with a "children" list is a composite, any other object is a leaf.

  $ python main.py --help

"""

import common_model
from common_model import ITEM_ACCESSORS
from composite_template import CompositeError
import visitors

import argparse
import json
import logging
import sys


# Parser for command-line arguments.
parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter)
parser.add_argument('tree', help="JSON file holding the tree")
parser.add_argument('--path', type=str, default='',
                    help="Slash separated names to descend into, e.g. ROOT/DSID")
parser.add_argument('--get', action='append', default=[], metavar='NAME',
                    help="Print the value of the only element NAME")
parser.add_argument('--values', action='append', default=[], metavar='NAME',
                    help="Print the values of every element NAME")
parser.add_argument('--split', type=int, default=None, metavar='N',
                    help="Print the scope regrouped by N elements")
parser.add_argument('--show', action='store_true', help="Pretty print the scope")
parser.add_argument('--log', type=str, help="Log level", default='WARNING')


def load_iterator(filepath):
    with open(filepath) as datafile:
        document = json.load(datafile)
    if isinstance(document, dict):
        document = [document]
    items = [common_model.build_item(item_document) for item_document in document]
    logging.info("Loaded {0} top level items from {1}".format(len(items), filepath))
    return ITEM_ACCESSORS.iterate_list(items)


def descend(iterator, path):
    names = [name for name in path.split('/') if name]
    if not names:
        return iterator
    return iterator.single_child(names[0], lambda child: descend(child, '/'.join(names[1:])))


def _format_window(window):
    return ", ".join("{0}={1}".format(item.name, item.value) for item in window)


def run(flags, out=None):
    out = out if out is not None else sys.stdout
    iterator = descend(load_iterator(flags.tree), flags.path)

    for name in flags.get:
        out.write("{0}: {1}\n".format(name, iterator.get_value(name)))
    for name in flags.values:
        out.write("{0}: {1}\n".format(name, iterator.get_values(name)))
    if flags.split is not None:
        for window in iterator.split(flags.split):
            out.write("[{0}]\n".format(_format_window(window)))
    if flags.show:
        pretty_printer = visitors.PrettyPrinter(out)
        for item in iterator:
            pretty_printer.visit(item)


def main(argv):
    # Parse the command-line flags.
    flags = parser.parse_args(argv[1:])

    numeric_log_level = getattr(logging, flags.log.upper(), None)
    if not isinstance(numeric_log_level, int):
        raise ValueError('Invalid log level: %s' % flags.log)
    logging.basicConfig(level=numeric_log_level, format='%(asctime)s %(message)s')

    try:
        run(flags)
    except CompositeError as error:
        logging.error("Query failed: {0}".format(error))
        return 1
    return 0


def console_main():
    sys.exit(main(sys.argv))


if __name__ == '__main__':
    console_main()
