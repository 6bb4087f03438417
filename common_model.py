from accessors import attribute_accessors

##
## Composite pattern
##

class Item:
    """ A named composite, its children are kept in insertion order """
    def __init__(self, name):
        self.name = name
        self.children = []

    def add_child(self, child):
        self.children.append(child)
        return self

    @property
    def value(self):
        return None

    def iterate(self, function):
        for child in self:
            function(child)

    def traverse(self, visitor):
        self.iterate(visitor.visit)

    def __iter__(self):
        return iter(self.children)

    def __repr__(self):
        return "{0} (Composite)".format(self.name)


class RawValueItem(Item):
    """ The raw value is intended to be any type"""
    def __init__(self, name, value):
        super().__init__(name)
        self.rawvalue = value
        # A leaf, as opposed to a composite without children
        self.children = None

    @property
    def value(self):
        return self.rawvalue

    def add_child(self, child):
        raise TypeError("{0} is a leaf".format(self.name))

    def __iter__(self):
        return iter(())

    def __str__(self):
        return str(self.rawvalue)

    def __repr__(self):
        return "{0} = {1!r}".format(self.name, self.rawvalue)


ITEM_ACCESSORS = attribute_accessors()


def build_item(document):
    """ Builds items from nested {"name", "value", "children"} dictionaries """
    if 'children' in document and document['children'] is not None:
        item = Item(document['name'])
        for child_document in document['children']:
            item.add_child(build_item(child_document))
        return item
    return RawValueItem(document['name'], document.get('value'))
