import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from witc import ast, modpath, naming
from witc.context import FunctionContext, ModuleContext
from witc.errors import FileError, UnsupportedDeclarationError
from witc.log import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), 'templates')


def render_type(type_name, context):
    go_type = context.find_type(type_name)
    logger.debug('%s maps to %s (%s)', type_name, go_type, go_type.describe())
    return str(go_type)


def create_environment(template_dir=TEMPLATE_DIR):
    env = Environment(
        loader=FileSystemLoader(template_dir),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters['public'] = naming.public
    env.filters['private'] = naming.private
    env.filters['go_type'] = render_type
    return env


def generate_function(function_ast, parent_context, env=None):
    if env is None:
        env = create_environment()

    parent_context.register(naming.public(function_ast.name), function_ast)
    context = FunctionContext(parent_context, declaration=function_ast)

    return env.get_template('function.go.j2').render(
        module=context.module,
        function=function_ast,
        scope=context,
    )


def generate_module(module_ast: ast.module, *, module, package, filename=None, env=None):
    if env is None:
        env = create_environment()
    context = ModuleContext(module=module, package=package, filename=filename)

    blocks = []
    for decl in module_ast.declarations:
        if isinstance(decl, ast.function_declaration):
            blocks.append(generate_function(decl, context, env))
        else:
            raise UnsupportedDeclarationError(decl, filename)

    return env.get_template('module.go.j2').render(package=package, blocks=blocks)


def codegen(dest, filename, module_ast, env=None):
    """Render the stubs for one parsed source file and write them under ``dest``.

    The text is rendered before anything touches the disk, so a file that
    fails to generate leaves no partial output behind. Returns the path of the
    written file.
    """
    filename = os.fspath(filename)
    module_path = modpath.derive(filename)
    text = generate_module(
        module_ast,
        module=module_path.module,
        package=module_path.package,
        filename=filename,
        env=env,
    )

    directory = os.path.join(dest, module_path.directory)
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise FileError('create directory', directory, e) from e

    output = module_path.output_path(dest)
    try:
        with open(output, 'w', encoding='utf-8', newline='\n') as fp:
            fp.write(text)
    except OSError as e:
        raise FileError('write', output, e) from e

    logger.info('Generated %s from %s', output, filename)
    return output
