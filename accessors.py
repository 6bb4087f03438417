from composite_iterator import CompositeIterator
from composite_template import check_accessors


##
## Accessor bundles
##
class Accessors:
    """ The three functions telling how to read an element.

    name_of(element) -> str, value_of(element) -> scalar or None,
    children_of(element) -> sequence, or None for a true leaf.
    """
    def __init__(self, name_of, value_of, children_of):
        check_accessors(name_of, value_of, children_of)
        self.name_of = name_of
        self.value_of = value_of
        self.children_of = children_of

    def iterate(self, target):
        return CompositeIterator.create(target, self.name_of, self.value_of,
                                        self.children_of)

    def iterate_list(self, targets):
        return CompositeIterator.create_from_list(targets, self.name_of,
                                                  self.value_of, self.children_of)


def attribute_accessors(name='name', value='value', children='children'):
    """ Reads elements through their attributes, a missing attribute reads as None """
    return Accessors(lambda element: getattr(element, name),
                     lambda element: getattr(element, value, None),
                     lambda element: getattr(element, children, None))


def mapping_accessors(name='name', value='value', children='children'):
    """ Reads dictionary shaped elements, such as decoded JSON objects """
    return Accessors(lambda element: element[name],
                     lambda element: element.get(value),
                     lambda element: element.get(children))
