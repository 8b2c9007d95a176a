import importlib.util
import io
import os.path
import struct
import tempfile

PYTHON_CODECS = {
    "bool": "bool",
    "bytes": "bytes",
    "f64": "float",
    "i32": "int",
    "str": "str",
}

def load_module(name, path):
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module

def load_generated(text, name="generated_packets"):
    with tempfile.TemporaryDirectory() as d:
        path = os.path.join(d, name + ".py")
        with open(path, "w") as f:
            f.write(text)
        return load_module(name, path)

class Registry:
    """
    Stands in for the codec runtime the generated code is written against.
    """
    FORMATS = {
        bool: struct.Struct("<?"),
        float: struct.Struct("<d"),
        int: struct.Struct("<i"),
    }
    LENGTH = struct.Struct("<I")

    def __init__(self):
        self.packets = {}

    def encode(self, writer, type_, value):
        if type_ in self.FORMATS:
            writer.write(self.FORMATS[type_].pack(value))
        elif type_ in (str, bytes):
            data = value.encode() if type_ is str else value
            writer.write(self.LENGTH.pack(len(data)))
            writer.write(data)
        else:
            type_.encode(self, writer, value)

    def decode(self, reader, type_):
        if type_ in self.FORMATS:
            format = self.FORMATS[type_]
            return format.unpack(self._read(reader, format.size))[0]
        elif type_ in (str, bytes):
            length, = self.LENGTH.unpack(self._read(reader, self.LENGTH.size))
            data = self._read(reader, length)
            return data.decode() if type_ is str else data
        return type_.decode(self, reader)

    def _read(self, reader, size):
        data = reader.read(size)
        if len(data) != size:
            raise EOFError("wanted {} bytes, got {}".format(size, len(data)))
        return data

    def register_packet(self, type_, default):
        if not isinstance(default, type_):
            raise TypeError("default instance of the wrong type")
        if default.PACKET_ID in self.packets:
            raise ValueError("packet {} registered twice".format(default.PACKET_ID))
        self.packets[default.PACKET_ID] = type_

    def round_trip(self, type_, value):
        writer = io.BytesIO()
        type_.encode(self, writer, value)
        return type_.decode(self, io.BytesIO(writer.getvalue()))
