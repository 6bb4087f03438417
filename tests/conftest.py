import sys
from pathlib import Path

import pytest

# Make the top level modules importable from the tests
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from common_model import ITEM_ACCESSORS, Item, RawValueItem  # noqa: E402


def _composite(name, *children):
    item = Item(name)
    for child in children:
        item.add_child(child)
    return item


def _coordinates(name, names, count):
    return _composite(name, *[RawValueItem(names[i % len(names)], i + 1)
                              for i in range(count)])


@pytest.fixture
def tree():
    """
    ROOT
      - DSID: RCNM 1, RCID 2, ENSP 3, ENED 4, PRED "test string",
              TEST (YCOO 1, XCOO 2, ... YCOO 7, XCOO 8)
      - PRID: C2IT (YCOO 4, XCOO -4)
      - MRID (three times): C3IL (YCOO 1, XCOO 2, ZCOO 3, ... ZCOO 15)
    ELM1 101 .. ELM5 105
    Repeat 1 .. Repeat 6
    """
    dsid = _composite('DSID',
                      RawValueItem('RCNM', 1),
                      RawValueItem('RCID', 2),
                      RawValueItem('ENSP', 3),
                      RawValueItem('ENED', 4),
                      RawValueItem('PRED', 'test string'),
                      _coordinates('TEST', ['YCOO', 'XCOO'], 8))
    prid = _composite('PRID', _composite('C2IT', RawValueItem('YCOO', 4),
                                         RawValueItem('XCOO', -4)))
    mrid = _composite('MRID', _coordinates('C3IL', ['YCOO', 'XCOO', 'ZCOO'], 15))
    root = _composite('ROOT', dsid, prid, mrid, mrid, mrid)

    top = [root]
    top.extend(RawValueItem('ELM%d' % i, 100 + i) for i in range(1, 6))
    top.extend(RawValueItem('Repeat', i) for i in range(1, 7))
    return top


@pytest.fixture
def iterator(tree):
    return ITEM_ACCESSORS.iterate_list(tree)
