# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import DB, mock_device, mock_document, mock_wall, mock_xyz

__all__ = ["DB", "mock_xyz", "mock_document", "mock_wall", "mock_device"]
