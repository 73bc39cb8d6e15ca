# -*- coding: utf-8 -*-

from pyrevit import DB


def list_linked_documents(app):
    """Return the session's linked documents, in session order."""
    if app is None:
        return []
    docs = []
    for doc in app.Documents:
        if doc.IsLinked:
            docs.append(doc)
    return docs


def document_title(doc):
    if doc is None:
        return u'<untitled>'
    try:
        return doc.Title or u'<untitled>'
    except Exception:
        return u'<untitled>'


def list_link_instances(doc):
    return list(DB.FilteredElementCollector(doc)
                .OfClass(DB.RevitLinkInstance)
                .WhereElementIsNotElementType()
                .ToElements())


def is_link_loaded(link_instance):
    try:
        return link_instance.GetLinkDocument() is not None
    except Exception:
        return False

