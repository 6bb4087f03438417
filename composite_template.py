import logging
from collections import namedtuple


##
## Errors
##
class CompositeError(Exception):
    pass


class UnknownMemberError(CompositeError, AttributeError):
    """ No element of the scope carries the requested name """
    pass


class MultiplicityError(CompositeError):
    pass


class NotCompositeError(CompositeError):
    pass


class TypeMismatchError(CompositeError, TypeError):
    pass


##
## Reflective resolution result
##
class Member(namedtuple('Member', ['kind', 'value'])):
    """ Outcome of resolving a name against a scope.

    kind is one of LEAF (value holds the scalar), COMPOSITE (value is None,
    a composite has no scalar of its own) or MISSING.
    """
    LEAF = 'leaf'
    COMPOSITE = 'composite'
    MISSING = 'missing'

    __slots__ = ()

    @property
    def found(self):
        return self.kind != Member.MISSING


def check_accessors(name_of, value_of, children_of):
    for label, function in (('name_of', name_of),
                            ('value_of', value_of),
                            ('children_of', children_of)):
        if not callable(function):
            raise TypeError("{0} must be callable, got {1!r}".format(label, function))


def check_type(value, value_type, element_name):
    if value_type is None or value is None:
        return value
    # bool is an int subclass, only accept it when asked for explicitly
    if (not isinstance(value, value_type)
            or (isinstance(value, bool) and not _accepts_bool(value_type))):
        raise TypeMismatchError("Element {0}: {1!r} is not a {2}".format(
            element_name, value, _type_label(value_type)))
    return value


def _accepts_bool(value_type):
    types = value_type if isinstance(value_type, tuple) else (value_type,)
    return any(issubclass(bool, t) and t is not int for t in types)


def _type_label(value_type):
    if isinstance(value_type, tuple):
        return " or ".join(t.__name__ for t in value_type)
    return value_type.__name__


##
## Engine
##
class CompositeTemplate:
    """ Holds one scope of sibling elements and the three accessors.

    Every query only looks at the current scope. Descending or splitting
    builds a new template around a new scope, the accessors are handed down
    unchanged.
    """

    def __init__(self, elements, name_of, value_of, children_of):
        if elements is None:
            raise TypeError("elements must be a sequence, not None")
        check_accessors(name_of, value_of, children_of)

        self.elements = tuple(elements)
        self.name_of = name_of
        self.value_of = value_of
        self.children_of = children_of

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def _matching(self, element_name):
        return [element for element in self.elements
                if self.name_of(element) == element_name]

    def _single(self, element_name):
        matches = self._matching(element_name)
        if len(matches) != 1:
            raise MultiplicityError(
                "Expected exactly one element named {0!r}, found {1}".format(
                    element_name, len(matches)))
        return matches[0]

    def extract(self, element_name):
        for element in self.elements:
            if self.name_of(element) == element_name:
                return element
        return None

    def get_single_value(self, element_name, value_type=None):
        element = self._single(element_name)
        return check_type(self.value_of(element), value_type, element_name)

    def try_get_value(self, element_name, value_type=None):
        element = self.extract(element_name)
        if element is None:
            return False, None
        return True, check_type(self.value_of(element), value_type, element_name)

    def get_multi_values(self, element_name, value_type=None):
        return [check_type(self.value_of(element), value_type, element_name)
                for element in self._matching(element_name)]

    def resolve_member(self, element_name):
        element = self.extract(element_name)
        if element is None:
            logging.debug("No member {0!r} in scope of {1} elements".format(
                element_name, len(self.elements)))
            return Member(Member.MISSING, None)

        if self.children_of(element) is not None:
            return Member(Member.COMPOSITE, None)
        return Member(Member.LEAF, self.value_of(element))

    ##
    ## Descent
    ##
    def create_sub_iterator_single(self, element_name):
        return self._create_sub_iterator(self._single(element_name), element_name)

    def create_sub_iterator_multiple(self, element_name):
        return _Restartable(self._gen_sub_iterators, element_name)

    def _gen_sub_iterators(self, element_name):
        for element in self._matching(element_name):
            yield self._create_sub_iterator(element, element_name)

    def _create_sub_iterator(self, element, element_name):
        children = self.children_of(element)
        if children is None:
            raise NotCompositeError(
                "Element {0!r} is not composite".format(element_name))
        sub_iterator = self.spawn(children)
        logging.debug("Descending into {0!r} ({1} children)".format(
            element_name, len(sub_iterator)))
        return sub_iterator

    ##
    ## Splitting
    ##
    def split(self, group_size):
        return _Restartable(self._gen_windows, group_size)

    def _gen_windows(self, group_size):
        if group_size <= 0:
            return
        for start in range(0, len(self.elements), group_size):
            window = self.elements[start:start + group_size]
            logging.debug("Split window [{0}:{1}]".format(start, start + len(window)))
            yield self.spawn(window)

    def spawn(self, elements):
        # Imported here, the iterator module wraps this one
        from composite_iterator import CompositeIterator
        return CompositeIterator(CompositeTemplate(elements, self.name_of,
                                                   self.value_of, self.children_of))


class _Restartable:
    """ A lazy sequence which walks its source again on every iteration """

    def __init__(self, generator_function, *args):
        self.generator_function = generator_function
        self.args = args

    def __iter__(self):
        return self.generator_function(*self.args)
