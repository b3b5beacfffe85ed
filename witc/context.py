from witc import datatypes, naming
from witc.errors import DuplicatedNameError, UnknownTypeError


class Context:
    declaration = None
    kind = 'function'

    def __init__(self, parent=None, *, filename=None):
        self.parent = parent
        self.filename = filename
        self.symbols = {}

    def find_type(self, name):
        try:
            return datatypes.lookup(name)
        except UnknownTypeError:
            raise UnknownTypeError(name, self.declaration, self.filename) from None

    def register(self, name, symbol):
        if name in self.symbols:
            raise DuplicatedNameError(name, kind=self.kind, scope=self.scope(), filename=self.filename)

        self.symbols[name] = symbol
        return name

    def scope(self):
        return None

    def __getattr__(self, item):
        if self.parent is None:
            raise AttributeError(item)

        return getattr(self.parent, item)


class ModuleContext(Context):
    def __init__(self, *, module, package, filename=None):
        super().__init__(filename=filename)
        self.module = module
        self.package = package


class FunctionContext(Context):
    kind = 'argument'

    def __init__(self, parent, *, declaration):
        super().__init__(parent=parent, filename=parent.filename)
        self.declaration = declaration

        for arg in declaration.arguments:
            self.register(naming.private(arg.name), arg)

    def scope(self):
        return 'function "%s"' % self.declaration.name
