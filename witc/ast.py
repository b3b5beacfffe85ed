from collections import namedtuple

module = namedtuple('Module', ['declarations'])
function_declaration = namedtuple('FunctionDeclaration', ['name', 'arguments', 'return_type', 'lineno'])
argument = namedtuple('Argument', ['name', 'type', 'lineno'])
return_value = namedtuple('Return', ['type'])
