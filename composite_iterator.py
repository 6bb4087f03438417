""" Iterator over instances of classes designed with the composite pattern.

The element class itself is never inspected. Three functions given at
creation time tell the iterator how to read the name, the value and the
children of an element.
"""

from composite_template import CompositeTemplate, Member, UnknownMemberError


class CompositeIterator:
    def __init__(self, template):
        self.core = template

    @classmethod
    def create(cls, target, name_of, value_of, children_of):
        """ Iterator whose scope is the single top level element `target` """
        return cls.create_from_list([target], name_of, value_of, children_of)

    @classmethod
    def create_from_list(cls, targets, name_of, value_of, children_of):
        return cls(CompositeTemplate(targets, name_of, value_of, children_of))

    def __len__(self):
        return len(self.core)

    def __iter__(self):
        return iter(self.core)

    def __repr__(self):
        return "<CompositeIterator [{0}]>".format(
            ", ".join(self.core.name_of(element) for element in self.core))

    def extract(self, element_name):
        """ First element named `element_name`, or None """
        return self.core.extract(element_name)

    def get_value(self, element_name, value_type=None):
        """ Value of the only element named `element_name`.

        Raises MultiplicityError when there is no such element or more than
        one, TypeMismatchError when value_type is given and not matched.
        """
        return self.core.get_single_value(element_name, value_type)

    def try_get_value(self, element_name, value_type=None):
        """ (found, value) pair for the first element named `element_name` """
        return self.core.try_get_value(element_name, value_type)

    def get_values(self, element_name, value_type=None):
        return self.core.get_multi_values(element_name, value_type)

    def single_child(self, element_name, function):
        """ Calls `function` with an iterator over the children of the only
        element named `element_name` and returns what it returns.
        """
        return function(self.core.create_sub_iterator_single(element_name))

    def multi_child(self, element_name, function):
        """ Lazily maps `function` over iterators on the children of every
        element named `element_name`.
        """
        return _MappedChildren(self.core.create_sub_iterator_multiple(element_name),
                               function)

    def split(self, group_size):
        return self.core.split(group_size)

    def resolve_member(self, element_name):
        return self.core.resolve_member(element_name)

    def as_dynamic(self):
        return DynamicView(self.core)


class _MappedChildren:
    def __init__(self, sub_iterators, function):
        self.sub_iterators = sub_iterators
        self.function = function

    def __iter__(self):
        for sub_iterator in self.sub_iterators:
            yield self.function(sub_iterator)


class DynamicView:
    """ Attribute style access to the members of a scope.

    view.NAME is the value of the first leaf named NAME, None when that
    element is composite. Unknown names raise UnknownMemberError, which is
    an AttributeError.

    A member named _template, or any name starting with a double underscore,
    is not reachable as an attribute. Use view["NAME"] for those, and for
    names which are not identifiers.
    """

    def __init__(self, template):
        # Bypass our own __getattr__ lookups on the instance dictionary
        self.__dict__['_template'] = template

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self[name]

    def __getitem__(self, name):
        member = self._template.resolve_member(name)
        if member.kind == Member.MISSING:
            raise UnknownMemberError(name)
        return member.value

    def __setattr__(self, name, value):
        raise AttributeError("{0} is read only".format(type(self).__name__))

    def __dir__(self):
        return sorted(set(self._template.name_of(element)
                          for element in self._template))
