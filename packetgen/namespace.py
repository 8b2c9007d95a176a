from .datatypes import AmbiguousName, NameNotFound, qualified

class Namespace:
    def __init__(self, name):
        self.name = name
        self.children = {}
        self.identifiers = []
    def child(self, name):
        if name not in self.children:
            self.children[name] = Namespace(name)
        return self.children[name]
    def sorted_children(self):
        return [self.children[name] for name in sorted(self.children)]
    def is_empty(self):
        return not self.children and not self.identifiers
    def shape(self):
        return (
            self.name,
            tuple(c.shape() for c in self.sorted_children()),
            tuple(self.identifiers),
        )
    def __repr__(self):
        return "Namespace({!r}, children={!r}, identifiers={!r})".format(
            self.name, sorted(self.children), self.identifiers,
        )

def group_identifiers(root, names):
    """
    Builds the namespace tree rooted at a node called `root` from qualified
    names like `a.b.c` (or `a::b::c`). Every segment but the last becomes a
    nested namespace, the last is added as an identifier of the innermost
    one. Empty segments are skipped.
    """
    result = Namespace(root)
    for name in names:
        *path, identifier = name.replace("::", ".").split(".")
        namespace = result
        for part in path:
            if not part:
                continue
            namespace = namespace.child(part)
        namespace.identifiers.append(identifier)
    return result

def find_definition(definitions, parts):
    parts = tuple(parts)
    matches = [d for d in definitions.values() if d.parts() == parts]
    if not matches:
        raise NameNotFound(qualified(parts))
    if len(matches) > 1:
        raise AmbiguousName(qualified(parts), [d.id for d in matches])
    return matches[0]
