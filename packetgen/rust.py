from .emit import indent, print
from .target import Target

RUST_KEYWORDS = """
    abstract as async await become box break const continue do dyn else enum
    extern false final fn for if impl in let loop macro match mod move mut
    override priv pub ref return static struct trait true try type typeof
    unsafe unsized use virtual where while yield
""".split()

# These can't be raw identifiers.
RUST_RESERVED = {
    "crate": "crate_",
    "self": "self_",
    "super": "super_",
}
RUST_RESERVED.update({k: "r#{}".format(k) for k in RUST_KEYWORDS})

class Rust(Target):
    name = "rust"
    extension = ".rs"
    comment = "//"
    blank_after_open = True
    reserved = RUST_RESERVED

    def preamble(self):
        return ["#[allow(unused_imports)]", ""]

    def emit_namespace_open(self, namespace):
        print("pub mod {} {{".format(self.identifier(namespace.name)))
        with indent():
            print("use std::{any::{Any, type_name}, io::{Write, Read}};")
            print("use crate::{packet::*, codec::*};")

    def emit_namespace_close(self, namespace):
        print("}")

    def emit_packet_comment(self, definition):
        print("/* Packet {}: {} */".format(definition.id, definition.name))

    def emit_struct(self, identifier, definition):
        print("#[derive(Default, Clone, Debug)]")
        print("pub struct {} {{".format(identifier))
        for name, type_ in self.fields(definition):
            print("    pub {}: {},".format(name, type_))
        print("}")

    def emit_codec(self, identifier, definition):
        fields = self.fields(definition)
        print("#[allow(unused_variables)]")
        print("#[allow(unused_mut)]")
        print("impl Codec for {} {{".format(identifier))
        print("    type Target = Self;")
        print()
        print("    fn encode(&self, registry: &CodecRegistry, writer: &mut dyn Write, value: &Self::Target) -> CodecResult<()> {")
        for name, _ in fields:
            print("        registry.encode(writer, &value.{})?;".format(name))
        print("        Ok(())")
        print("    }")
        print()
        print("    fn decode(&self, registry: &CodecRegistry, reader: &mut dyn Read) -> CodecResult<Self::Target> {")
        print("        let mut value = Self::Target::default();")
        for name, _ in fields:
            print("        value.{} = registry.decode(reader)?;".format(name))
        print("        Ok(value)")
        print("    }")
        print("}")

    def emit_metadata(self, identifier, definition):
        print("""\
impl Packet for {name} {{
    fn as_any(&self) -> &dyn Any {{ self }}
    fn as_any_mut(&mut self) -> &mut dyn Any {{ self }}

    fn packet_name(&self) -> &str {{ type_name::<Self>() }}
    fn packet_id(&self) -> i32 {{ {id} }}
    fn model_id(&self) -> i32 {{ {model} }}
}}""".format(name=identifier, id=definition.id, model=definition.model))

    def emit_registry(self, definitions):
        print()
        print("pub(super) mod internal {")
        print("    use crate::packet::PacketRegistry;")
        print()
        print("    pub fn register_packets(registry: &mut PacketRegistry) {")
        for _, path in self.registered(definitions):
            print("        registry.register_packet::<super::{}>(Default::default());".format("::".join(path)))
        print("    }")
        print("}")
