from .datatypes import AmbiguousName, DefinitionError, Diagnostic, NameBindingError, NameNotFound, NamespaceConflict, PacketDefinition
from .generate import TARGETS, generate
