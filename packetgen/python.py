import keyword
import re

from .emit import import_, indent, print
from .target import Target

# Codec methods live on the packet class next to the fields.
PYTHON_RESERVED = {k: k + "_" for k in keyword.kwlist + ["decode", "encode"]}

# Read by the dataclass body after the fields are bound.
CLASS_BODY_NAMES = ["classmethod", "dataclasses"]

RE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

def string_literal(value):
    return '"{}"'.format(value.replace("\\", "\\\\").replace('"', '\\"'))

class Python(Target):
    name = "python"
    extension = ".py"
    comment = "#"
    reserved = PYTHON_RESERVED

    def identifier(self, name):
        if keyword.iskeyword(name):
            return name + "_"
        return name

    def fields(self, definition):
        # A field must not hide a name that a later line of the class body
        # reads, such as another field's descriptor.
        hidden = set(CLASS_BODY_NAMES)
        for _, type_ in definition.field_items():
            hidden.update(RE_NAME.findall(type_))
        result = []
        for name, type_ in super().fields(definition):
            if name in hidden:
                name += "_"
            result.append((name, type_))
        return result

    def emit(self, definitions, tree):
        if self.runtime is not None:
            import_("from {} import *".format(self.runtime))
        super().emit(definitions, tree)

    def emit_namespace_open(self, namespace):
        print("class {}:".format(self.identifier(namespace.name)))

    def emit_empty_body(self):
        print("pass")

    def emit_packet_comment(self, definition):
        print("# Packet {}: {}".format(definition.id, definition.name))

    def emit_packet(self, identifier, definition):
        self.emit_packet_comment(definition)
        self.emit_struct(identifier, definition)
        with indent():
            if definition.fields:
                print()
            self.emit_codec(identifier, definition)
            print()
            self.emit_metadata(identifier, definition)

    def emit_struct(self, identifier, definition):
        import_("import dataclasses")
        print("@dataclasses.dataclass")
        print("class {}:".format(identifier))
        for name, type_ in self.fields(definition):
            print("    {}: {} = dataclasses.field(default_factory={})".format(name, type_, type_))

    def emit_codec(self, identifier, definition):
        fields = self.fields(definition)
        print("@classmethod")
        print("def encode(cls, registry, writer, value):")
        for name, type_ in fields:
            print("    registry.encode(writer, {}, value.{})".format(type_, name))
        if not fields:
            print("    pass")
        print()
        print("@classmethod")
        print("def decode(cls, registry, reader):")
        print("    value = cls()")
        for name, type_ in fields:
            print("    value.{} = registry.decode(reader, {})".format(name, type_))
        print("    return value")

    def emit_metadata(self, identifier, definition):
        print("PACKET_ID = {}".format(definition.id))
        print("MODEL_ID = {}".format(definition.model))
        print("PACKET_NAME = {}".format(string_literal(definition.name)))

    def emit_registry(self, definitions):
        print()
        print()
        print("def register_packets(registry):")
        registered = self.registered(definitions)
        for _, path in registered:
            print("    registry.register_packet({path}, {path}())".format(path=".".join(path)))
        if not registered:
            print("    pass")
