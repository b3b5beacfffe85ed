def split_name(name):
    parts = name.split('-')
    if not all(parts):
        raise ValueError('Empty segment in identifier "%s"' % name)
    return parts


def capitalize(word):
    # Only the first letter changes, "processID" stays "ProcessID".
    return word[:1].upper() + word[1:]


def public(name):
    """Exported name: ``send-receive-skip-search`` -> ``SendReceiveSkipSearch``."""
    return ''.join(capitalize(part) for part in split_name(name))


def private(name):
    """Parameter name: ``process-id`` -> ``processId``."""
    first, *rest = split_name(name)
    return first.lower() + ''.join(capitalize(part) for part in rest)
