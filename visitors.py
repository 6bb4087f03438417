from common_model import Item, RawValueItem

import functools
import inspect
import sys

##
## A decorator to simulate method overloading
##
class MultiMethod:
    def __init__(self):
        self._implementations = {}

    def register(self, key):
        def inner(f):
            if key in self._implementations:
                raise TypeError("Duplicate registration for %r" % key)
            self._implementations[key] = f
            return self
        return inner

    def __get__(self, obj, objtype):
        """Support instance methods."""
        return functools.partial(self.__call__, obj)

    def _get_method(self, arg_type):
        for curr_type in inspect.getmro(arg_type):
            if curr_type in self._implementations:
                return self._implementations[curr_type]
        raise TypeError("No implementation registered for %r" % arg_type)

    def __call__(self, *args):
        return self._get_method(type(args[1]))(*args)

##
## Visitors
##
class Visitor:
    pass

class NameLengthSum(Visitor):
    """ A leaf weighs the length of its name, a composite the sum of its children """
    dispatch = MultiMethod()

    def __init__(self):
        self.total = 0

    @dispatch.register(Item)
    def visit(self, visitee):
        visitee.traverse(self)

    @dispatch.register(RawValueItem)
    def visit(self, visitee):
        self.total += len(visitee.name)

    def result(self):
        return self.total

class PrettyPrinter(Visitor):
    dispatch = MultiMethod()

    def __init__(self, stream=None):
        self.indent_level = 0
        self.stream = stream if stream is not None else sys.stdout

    def __indent(self):
        self.stream.write('\t'*self.indent_level)

    @dispatch.register(Item)
    def visit(self, item):
        self.__indent()
        self.stream.write("{item}\n".format(item=repr(item)))

        self.indent_level += 1
        item.traverse(self)
        self.indent_level -= 1

    @dispatch.register(RawValueItem)
    def visit(self, item):
        self.__indent()
        self.stream.write("{item}\n".format(item=repr(item)))


def weigh(item):
    summer = NameLengthSum()
    summer.visit(item)
    return summer.result()
