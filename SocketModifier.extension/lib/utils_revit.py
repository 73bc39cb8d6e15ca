# -*- coding: utf-8 -*-

import traceback

from pyrevit import DB
from pyrevit import forms
from pyrevit import revit
from pyrevit import script


def get_logger():
    return script.get_logger()


def safe_log(logger_method, msg, *args):
    try:
        logger_method(msg, *args)
    except UnicodeEncodeError:
        try:
            # Fallback to repr which escapes non-ascii
            logger_method(repr(msg), *args)
        except Exception:
            logger_method("<Log message encoding failed>")


def alert(msg, title='SocketModifier', warn_icon=True):
    try:
        forms.alert(msg, title=title, warn_icon=warn_icon)
    except Exception:
        # As a last resort if UI is unavailable
        safe_log(get_logger().warning, msg)


def log_exception(prefix='Error'):
    logger = get_logger()
    safe_log(logger.error, prefix)
    safe_log(logger.error, traceback.format_exc())


def safe_str(obj):
    try:
        return str(obj)
    except Exception:
        try:
            return repr(obj)
        except Exception:
            return '<unprintable>'


def element_name(elem):
    if elem is None:
        return u''
    try:
        return elem.Name or u''
    except Exception:
        return u'<{0}>'.format(safe_str(getattr(elem, 'Id', '?')))


def tx(name, doc=None):
    """Transaction context manager.

    Commits on a clean exit; rolls back and re-raises otherwise.

    Usage:
        with tx('My Tool', doc):
            ...
    """
    doc = doc or revit.doc
    t = DB.Transaction(doc, name)

    class _Tx(object):
        def __enter__(self):
            t.Start()
            return t

        def __exit__(self, exc_type, exc, tb):
            if exc_type:
                rb = getattr(t, 'RollBack', None) or getattr(t, 'Rollback', None)
                if rb:
                    rb()
                return False

            try:
                t.Commit()
            except Exception:
                rb = getattr(t, 'RollBack', None) or getattr(t, 'Rollback', None)
                if rb:
                    rb()
                raise
            return False

    return _Tx()
