"""
sentry_client.utils.stacks
~~~~~~~~~~~~~~~~~~~~~~~~~~

:copyright: (c) 2010-2017 by the Sentry Team, see AUTHORS for more details.
:license: BSD, see LICENSE for more details.
"""
import re
import sys
import traceback
from collections.abc import Mapping
from types import FrameType, TracebackType

__all__ = ('encode_stack_trace', 'get_stack_info', 'iter_traceback_frames',
           'parse_traceback')

# Lines of context captured on each side of the failing line
CONTEXT_LINES = 5

_traceback_line_re = re.compile(
    r'^\s*File "(?P<abs_path>[^"]+)", line (?P<lineno>\d+)'
    r'(?:, in (?P<function>.+))?\s*$')


def get_lines_from_file(filename, lineno, context_lines, loader=None,
                        module_name=None):
    """
    Returns context_lines before and after lineno from file.
    Returns (pre_context, context_line, post_context).
    """
    source = None
    if loader is not None and hasattr(loader, 'get_source'):
        try:
            source = loader.get_source(module_name)
        except Exception:
            # some loaders refuse modules they did not load themselves;
            # reading the file below still works for those
            source = None
        if source is not None:
            source = source.splitlines()
    if source is None:
        try:
            with open(filename, encoding='utf-8', errors='replace') as f:
                source = f.readlines()
        except (OSError, IOError):
            pass
    if source is None:
        return None, [], None

    lower_bound = max(0, lineno - context_lines)
    upper_bound = min(lineno + 1 + context_lines, len(source))

    try:
        pre_context = [line.strip('\r\n') for line in source[lower_bound:lineno]]
        context_line = source[lineno].strip('\r\n')
        post_context = [line.strip('\r\n')
                        for line in source[(lineno + 1):upper_bound]]
    except IndexError:
        # the file may have changed since it was loaded into memory
        return None, [], None

    return pre_context, context_line, post_context


def _getitem_from_frame(f_locals, key, default=None):
    """
    f_locals is not guaranteed to have .get(), but it will always
    support __getitem__. Even if it doesnt, we return ``default``.
    """
    try:
        return f_locals[key]
    except Exception:
        return default


def iter_traceback_frames(tb):
    """
    Given a traceback object, it will iterate over all
    frames that do not contain the ``__traceback_hide__``
    local variable.
    """
    while tb:
        # support for __traceback_hide__ which is used by a few libraries
        # to hide internal frames.
        f_locals = getattr(tb.tb_frame, 'f_locals', {})
        if not _getitem_from_frame(f_locals, '__traceback_hide__'):
            yield tb.tb_frame, getattr(tb, 'tb_lineno', None)
        tb = tb.tb_next


def _relative_filename(abs_path, module_name):
    # This changes /foo/site-packages/baz/bar.py into baz/bar.py
    if not abs_path or not module_name:
        return abs_path
    try:
        base_filename = sys.modules[module_name.split('.', 1)[0]].__file__
        filename = abs_path.split(base_filename.rsplit('/', 2)[0], 1)[-1][1:]
    except (KeyError, AttributeError, TypeError):
        return abs_path
    return filename or abs_path


def _build_frame(abs_path, lineno, function, module=None, loader=None,
                 context_line=None):
    frame = {
        'abs_path': abs_path,
        'filename': _relative_filename(abs_path, module),
        'function': function or '<unknown>',
        'lineno': lineno,
    }
    if module:
        frame['module'] = module

    pre_context, post_context = None, None
    if lineno and abs_path:
        pre_context, source_line, post_context = get_lines_from_file(
            abs_path, lineno - 1, CONTEXT_LINES, loader, module)
        if source_line is not None:
            context_line = source_line

    if context_line is not None:
        frame['context_line'] = context_line
        frame['pre_context'] = pre_context or []
        frame['post_context'] = post_context or []
    return frame


def get_stack_info(frames):
    """
    Given a list of frames, returns a list of stack information
    dictionary objects that are JSON-ready.

    Each item is either a frame object or a ``(frame, lineno)`` pair.
    """
    __traceback_hide__ = True  # NOQA

    results = []
    for frame_info in frames:
        if isinstance(frame_info, (list, tuple)):
            frame, lineno = frame_info
        else:
            frame = frame_info
            lineno = frame_info.f_lineno

        # Support hidden frames
        f_locals = getattr(frame, 'f_locals', {})
        if _getitem_from_frame(f_locals, '__traceback_hide__'):
            continue

        f_globals = getattr(frame, 'f_globals', {})

        f_code = getattr(frame, 'f_code', None)
        if f_code:
            abs_path = f_code.co_filename
            function = f_code.co_name
        else:
            abs_path = None
            function = None

        results.append(_build_frame(
            abs_path, lineno, function,
            module=_getitem_from_frame(f_globals, '__name__'),
            loader=_getitem_from_frame(f_globals, '__loader__'),
        ))
    return results


def parse_traceback(text):
    """
    Extracts frames from a traceback formatted the way the interpreter
    prints it. Lines that do not describe a frame are skipped.
    """
    results = []
    lines = text.splitlines()
    for idx, line in enumerate(lines):
        match = _traceback_line_re.match(line)
        if not match:
            continue

        # the interpreter prints the source line right below the location
        context_line = None
        if idx + 1 < len(lines):
            following = lines[idx + 1]
            if following.strip() and not _traceback_line_re.match(following) \
                    and following.startswith('    '):
                context_line = following.strip()

        results.append(_build_frame(
            match.group('abs_path'),
            int(match.group('lineno')),
            match.group('function'),
            context_line=context_line,
        ))
    return results


def _encode_frame_records(records):
    results = []
    for record in records:
        if isinstance(record, Mapping):
            results.append(dict(record))
        elif isinstance(record, traceback.FrameSummary):
            results.append(_build_frame(
                record.filename, record.lineno, record.name,
                context_line=record.line))
        else:
            results.extend(get_stack_info([record]))
    return results


def encode_stack_trace(stack_trace):
    """
    Encodes ``stack_trace`` into an ordered list of frame dictionaries,
    outermost call first.

    ``stack_trace`` may be a traceback object, a frame object, a formatted
    traceback string, or a sequence of frame records (dictionaries,
    ``traceback.FrameSummary`` instances or ``(frame, lineno)`` pairs).
    """
    if stack_trace is None:
        return []
    if isinstance(stack_trace, str):
        return parse_traceback(stack_trace)
    if isinstance(stack_trace, TracebackType):
        return get_stack_info(iter_traceback_frames(stack_trace))
    if isinstance(stack_trace, FrameType):
        return get_stack_info(traceback.walk_stack(stack_trace))[::-1]
    return _encode_frame_records(stack_trace)
