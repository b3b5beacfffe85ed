import os
from collections import namedtuple
from pathlib import Path

from witc.errors import InvalidModuleNameError

SOURCE_EXTENSION = '.wit'
OUTPUT_SUFFIX = '.go'


class ModulePath(namedtuple('ModulePath', ['module', 'parts', 'package', 'directory'])):
    """Where the stubs generated from one source file live.

    ``wit/lunatic_timer.wit`` gives module ``lunatic::timer``, directory
    ``lunatic/timer`` and package ``timer``.
    """

    def output_path(self, dest, suffix=OUTPUT_SUFFIX):
        return Path(dest, self.directory, self.package + suffix)


def base_name(filename, extension=SOURCE_EXTENSION):
    name = os.path.basename(os.fspath(filename))
    if extension and name.endswith(extension):
        name = name[:-len(extension)]
    return name


def derive(filename, extension=SOURCE_EXTENSION):
    name = base_name(filename, extension)
    parts = name.split('_')
    if not all(parts):
        raise InvalidModuleNameError(name)

    return ModulePath(
        module='::'.join(parts),
        parts=tuple(parts),
        package=parts[-1],
        directory=os.path.join(*parts),
    )
