import argparse
import os
import sys

from . import datatypes
from .loader import load_definitions
from .namespace import group_identifiers
from .python import Python
from .resolve import resolve_definitions, retain
from .rust import Rust

TARGETS = {t.name: t for t in [Rust, Python]}

def make_target(name, root="packets", runtime=None):
    if name not in TARGETS:
        raise ValueError("unknown target {!r}, expected one of {}".format(name, ", ".join(sorted(TARGETS))))
    return TARGETS[name](root=root, runtime=runtime)

def generate(codecs, packets, target="rust", root="packets", runtime=None):
    """
    Turns a codec table and a packet table into generated source code.

    Returns the generated text and the list of `Diagnostic`s for packets
    that were left out because one of their codecs is unknown.
    """
    codecs = datatypes.load_codecs(codecs)
    packets = datatypes.load_packets(packets)
    target = make_target(target, root=root, runtime=runtime)

    resolved, skipped, diagnostics = resolve_definitions(packets, codecs)
    definitions = retain(resolved, skipped)
    tree = group_identifiers(root, [d.name for d in definitions.values() if d.name is not None])

    emit = target.make_emit()
    with emit:
        target.emit(definitions, tree)
    return emit.get(), diagnostics

def write_file(filename, data):
    with open(filename, "w") as f:
        f.write(data)

def default_output(target):
    out_dir = os.environ.get("OUT_DIR")
    if not out_dir:
        raise datatypes.DefinitionError("OUT_DIR is not set, pass an output file with -o")
    return os.path.join(out_dir, "packets" + TARGETS[target].extension)

def run(args):
    if args.cargo:
        print("cargo:rerun-if-changed={}".format(args.codecs))
        print("cargo:rerun-if-changed={}".format(args.packets))
    codecs, packets = load_definitions(args.codecs, args.packets)
    text, diagnostics = generate(codecs, packets, target=args.target, root=args.root, runtime=args.runtime)
    for diagnostic in diagnostics:
        if args.cargo:
            print("cargo:warning={}".format(diagnostic))
        else:
            print("warning: {}".format(diagnostic), file=sys.stderr)
    out = args.out
    if out is None and args.cargo:
        out = default_output(args.target)
    if out is None:
        sys.stdout.write(text)
    else:
        write_file(out, text)

def main(argv=None):
    p = argparse.ArgumentParser(description="Generate packet structures, codecs and a packet registry from codec and packet definition files")
    p.add_argument("codecs", metavar="CODECS", help="Codec alias table (JSON or YAML)")
    p.add_argument("packets", metavar="PACKETS", help="Packet definitions (JSON or YAML)")
    p.add_argument("-o", "--out", metavar="OUT", help="Output file, defaults to stdout")
    p.add_argument("--target", choices=sorted(TARGETS), default="rust", help="Output language")
    p.add_argument("--root", default="packets", help="Name of the root namespace")
    p.add_argument("--runtime", metavar="MODULE", help="Module to star-import codec types from (python target only)")
    p.add_argument("--cargo", action="store_true", help="Print cargo build script directives and write to $OUT_DIR by default")
    args = p.parse_args(argv)
    try:
        run(args)
    except (datatypes.DefinitionError, datatypes.NameBindingError, OSError) as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
