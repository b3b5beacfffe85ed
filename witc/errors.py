class CompileError(Exception):
    filename = None


class WitSyntaxError(CompileError):
    def __init__(self, message, *, filename=None, lineno=None, column=None, token=None, expected=()):
        self.message = message
        self.filename = filename
        self.lineno = lineno
        self.column = column
        self.token = token
        self.expected = tuple(expected)
        super().__init__(self._format())

    def _format(self):
        text = '%s:%s:%s: %s' % (self.filename or '<string>', self.lineno, self.column, self.message)
        if self.expected:
            text += ' (expected %s)' % describe_alternatives(self.expected)
        return text


class DuplicatedNameError(CompileError):
    def __init__(self, name, *, kind='name', scope=None, filename=None):
        self.name = name
        self.filename = filename
        message = 'Duplicated %s "%s"' % (kind, name)
        if scope:
            message += ' in %s' % scope
        if filename:
            message = '%s: %s' % (filename, message)
        super().__init__(message)


class UnknownTypeError(CompileError):
    def __init__(self, type_name, declaration=None, filename=None):
        self.type_name = type_name
        self.declaration = declaration
        self.filename = filename

        message = 'Unknown type "%s"' % type_name
        if declaration is not None:
            message += ' in function "%s"' % declaration.name
        if filename is not None:
            if declaration is not None and declaration.lineno is not None:
                message = '%s:%d: %s' % (filename, declaration.lineno, message)
            else:
                message = '%s: %s' % (filename, message)
        super().__init__(message)


class UnsupportedDeclarationError(CompileError):
    def __init__(self, node, filename=None):
        self.node = node
        self.filename = filename
        message = 'Unsupported declaration %s' % type(node).__name__
        if filename:
            message = '%s: %s' % (filename, message)
        super().__init__(message)


class InvalidModuleNameError(CompileError):
    def __init__(self, name):
        self.name = name
        super().__init__('Cannot derive a module from "%s": empty name segment' % name)


class FileError(CompileError):
    def __init__(self, operation, path, cause=None):
        self.operation = operation
        self.path = path
        self.cause = cause
        message = 'failed to %s %s' % (operation, path)
        if cause is not None:
            message += ': %s' % (getattr(cause, 'strerror', None) or cause)
        super().__init__(message)


def describe_alternatives(items):
    items = list(items)
    if len(items) == 1:
        return items[0]
    return '%s or %s' % (', '.join(items[:-1]), items[-1])
