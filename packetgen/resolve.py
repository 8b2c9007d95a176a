from .datatypes import Diagnostic, canonicalize, snake

def resolve_fields(definition, codecs, diagnostics):
    """
    Returns `definition` with its fields renamed to snake case and mapped to
    the type descriptors from `codecs`, and whether every codec was found.

    Two source names with the same snake case form collide; the one sorting
    last wins.
    """
    fields = {}
    complete = True
    for name, codec in definition.field_items():
        key = snake(canonicalize(name))
        if codec in codecs:
            fields[key] = codecs[codec]
        else:
            diagnostics.append(Diagnostic(definition.id, codec))
            complete = False
    return definition._replace(fields=fields), complete

def resolve_definitions(definitions, codecs):
    diagnostics = []
    resolved = {}
    skipped = set()
    for id, definition in definitions.items():
        resolved[id], complete = resolve_fields(definition, codecs, diagnostics)
        if not complete:
            skipped.add(id)
    return resolved, skipped, diagnostics

def retain(definitions, skipped):
    return {id: d for id, d in sorted(definitions.items()) if id not in skipped}
