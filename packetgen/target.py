from .datatypes import NamespaceConflict, qualified
from .emit import Emit, indent, print
from .namespace import find_definition

HEADER = [
    "This file is automatically @generated.",
    "It is not intended for manual editing.",
]

class Target:
    """
    Emits the namespace tree as source code of one language.

    Subclasses provide the per-language pieces: namespace blocks, the
    struct, codec and metadata blocks of a packet and the registration
    procedure.
    """
    name = None
    extension = None
    comment = None
    indent_unit = "    "
    import_format = "{}"
    blank_after_open = False
    reserved = {}

    def __init__(self, root="packets", runtime=None):
        self.root = root
        self.runtime = runtime

    def make_emit(self):
        header = ["{} {}".format(self.comment, line) for line in HEADER]
        return Emit(self.indent_unit, self.import_format, header + [""] + self.preamble())

    def preamble(self):
        return []

    def field_name(self, name):
        return self.reserved.get(name, name)

    def fields(self, definition):
        return [(self.field_name(name), type_) for name, type_ in definition.field_items()]

    def identifier(self, name):
        """Escapes a namespace or packet name for use as a type or module name."""
        return self.field_name(name)

    def emit(self, definitions, tree):
        nameless = [d for d in definitions.values() if d.name is None]
        self.emit_namespace(definitions, tree, [], nameless)
        self.emit_registry(definitions)

    def emit_namespace(self, definitions, namespace, path, nameless=()):
        self.emit_namespace_open(namespace)
        with indent():
            items = 0
            for child in namespace.sorted_children():
                self.separate(items)
                self.emit_namespace(definitions, child, path + [child.name])
                items += 1
            for identifier in namespace.identifiers:
                if identifier in namespace.children:
                    raise NamespaceConflict(qualified(path + [identifier]))
                definition = find_definition(definitions, path + [identifier])
                self.separate(items)
                self.emit_packet(self.identifier(identifier), definition)
                items += 1
            for definition in nameless:
                self.separate(items)
                self.emit_placeholder(definition)
                items += 1
            if namespace.is_empty():
                self.emit_empty_body()
        self.emit_namespace_close(namespace)

    def separate(self, items):
        if items or self.blank_after_open:
            print()

    def emit_placeholder(self, definition):
        print("{} No name defined for packet {} (model: {})".format(self.comment, definition.id, definition.model))

    def emit_packet(self, identifier, definition):
        self.emit_packet_comment(definition)
        self.emit_struct(identifier, definition)
        print()
        self.emit_codec(identifier, definition)
        print()
        self.emit_metadata(identifier, definition)

    def emit_packet_comment(self, definition):
        raise NotImplementedError

    def emit_empty_body(self):
        pass

    def emit_namespace_close(self, namespace):
        pass

    def registered(self, definitions):
        """Retained, named packets as (id, path) pairs in id order."""
        return [(id, [self.identifier(p) for p in [self.root] + list(d.parts())]) for id, d in definitions.items() if d.name is not None]
