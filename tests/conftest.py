# -*- coding: utf-8 -*-
"""Pytest fixtures for SocketModifier tests."""
import json
import os
import sys
import tempfile
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "SocketModifier.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


# pyRevit only exists inside Revit; lib modules see the mocked DB namespace.
if "pyrevit" not in sys.modules:
    from mocks.revit_api import DB as MockDB

    pyrevit_stub = types.ModuleType("pyrevit")
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    pyrevit_stub.HOST_APP = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub


@pytest.fixture
def temp_config_file():
    """Create a temporary config file and return its path. Cleans up after test."""
    files = []

    def _create(data):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8')
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def host_doc():
    from mocks.revit_api import mock_document
    return mock_document("MEP", is_linked=False)


@pytest.fixture
def linked_doc():
    from mocks.revit_api import mock_document
    return mock_document("AR", is_linked=True)


@pytest.fixture
def session(host_doc, linked_doc):
    """Application with one host and one linked document."""
    from mocks.revit_api import MockApplication
    return MockApplication([host_doc, linked_doc])
