from collections import namedtuple
import re

RE_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
RE_QUALIFIED_SEPARATOR = re.compile(r"\.|::")

def canonicalize(s):
    if isinstance(s, tuple):
        return s
    result = []
    for part in s.split("_"):
        result.extend(p.lower() for p in RE_WORD_BOUNDARY.split(part) if p)
    return tuple(result)

def snake(c):
    return "_".join(c)

def split_qualified(name):
    return tuple(p for p in RE_QUALIFIED_SEPARATOR.split(name) if p)

def qualified(parts):
    return ".".join(parts)

class DefinitionError(ValueError):
    pass

class NameBindingError(LookupError):
    def __init__(self, name, message):
        super().__init__(message)
        self.name = name

class NameNotFound(NameBindingError):
    def __init__(self, name):
        super().__init__(name, "no packet definition named {}".format(name))

class AmbiguousName(NameBindingError):
    def __init__(self, name, ids):
        super().__init__(name, "packet name {} is bound by more than one definition (ids {})".format(
            name, ", ".join(str(i) for i in ids),
        ))
        self.ids = ids

class NamespaceConflict(NameBindingError):
    def __init__(self, name):
        super().__init__(name, "packet name {} is also the name of a namespace".format(name))

class Diagnostic(namedtuple("Diagnostic", "packet_id codec")):
    def __str__(self):
        return "no type for codec {} (from packet {})".format(self.codec, self.packet_id)

class PacketDefinition(namedtuple("PacketDefinition", "id name model fields")):
    def field_items(self):
        return sorted(self.fields.items())
    def parts(self):
        if self.name is None:
            return None
        return split_qualified(self.name)

def _check_mapping(obj, what):
    if not isinstance(obj, dict):
        raise DefinitionError("{} must be a mapping, got {}".format(what, type(obj).__name__))
    for k, v in obj.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise DefinitionError("{} must map strings to strings, got {!r}: {!r}".format(what, k, v))
    return obj

def load_codecs(obj):
    return dict(_check_mapping(obj, "codec table"))

def _packet_id(key):
    if isinstance(key, bool):
        raise DefinitionError("invalid packet id {!r}".format(key))
    if isinstance(key, int):
        return key
    if isinstance(key, str):
        try:
            return int(key)
        except ValueError:
            pass
    raise DefinitionError("invalid packet id {!r}".format(key))

def deserialize_packet(id, json_obj):
    if isinstance(json_obj, PacketDefinition):
        json_obj = json_obj._asdict()
        del json_obj["id"]
    if not isinstance(json_obj, dict):
        raise DefinitionError("packet {} must be a mapping".format(id))
    unknown = set(json_obj) - {"name", "model", "fields"}
    if unknown:
        raise DefinitionError("packet {} has unknown keys: {}".format(id, ", ".join(sorted(map(str, unknown)))))
    name = json_obj.get("name")
    if name is not None:
        if not isinstance(name, str) or not split_qualified(name):
            raise DefinitionError("packet {} has an invalid name {!r}".format(id, name))
        if name.endswith((".", ":")):
            raise DefinitionError("packet {} name {!r} ends with a separator".format(id, name))
    model = json_obj.get("model")
    if not isinstance(model, int) or isinstance(model, bool):
        raise DefinitionError("packet {} needs an integer model, got {!r}".format(id, model))
    if "fields" not in json_obj:
        raise DefinitionError("packet {} has no fields".format(id))
    fields = _check_mapping(json_obj["fields"], "fields of packet {}".format(id))
    return PacketDefinition(id, name, model, dict(fields))

def load_packets(obj):
    if not isinstance(obj, dict):
        raise DefinitionError("packet table must be a mapping, got {}".format(type(obj).__name__))
    result = {}
    for key, value in obj.items():
        id = _packet_id(key)
        if id in result:
            raise DefinitionError("duplicate packet id {}".format(id))
        result[id] = deserialize_packet(id, value)
    return {id: result[id] for id in sorted(result)}
