import threading

class Emit:
    def __init__(self, indent_unit="    ", import_format="use {};", header=()):
        self.indent_unit = indent_unit
        self.import_format = import_format
        self.header = list(header)
        self.cur_indent = 0
        self.lines = []
        self.imports = set()
        self.previous_emits = []
    def __enter__(self):
        self.previous_emits.append(_emit_get())
        _emit_set(self)
        return self
    def __exit__(self, exc_type, exc_value, traceback):
        if _emit_get() != self:
            raise RuntimeError("unexpected value for current emit")
        _emit_set(self.previous_emits.pop())
    def indent(self, level=1):
        class Indent:
            def __init__(self, emit, level):
                self.emit = emit
                self.level = level
            def __enter__(self):
                self.emit.cur_indent += self.level
            def __exit__(self, exc_type, exc_value, traceback):
                self.emit.cur_indent -= self.level
        return Indent(self, level)
    def print(self, string=""):
        prefix = self.indent_unit * self.cur_indent
        self.lines += [prefix + l if l else "" for l in (string + "\n").splitlines()]
    def import_(self, *args):
        self.imports.update(args)
    def get(self):
        head = list(self.header)
        if self.imports:
            for i in sorted(self.imports):
                head.append(self.import_format.format(i))
            head.append("")
        lines = head + self.lines
        while lines and lines[-1] == "":
            lines.pop()
        return "\n".join(lines + [""])

thread_local = threading.local()
thread_local.emit = object()

def _emit_set(emit):
    thread_local.emit = emit

def _emit_get():
    return getattr(thread_local, "emit", None)

def print(*args):
    return _emit_get().print(*args)

def import_(*args):
    return _emit_get().import_(*args)

def indent(*args):
    return _emit_get().indent(*args)
