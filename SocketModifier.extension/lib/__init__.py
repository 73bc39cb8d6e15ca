# -*- coding: utf-8 -*-

"""SocketModifier shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    config_loader: Configuration file loading
    utils_revit: Logging, alerts and transaction helpers
    link_reader: Linked document enumeration
    wall_collector: Wall collection and IFC material lookup
    device_matching: Bounding box match of devices against walls
    batch_updater: Writes wall material into device parameters
"""

__version__ = "0.1.0"
__author__ = "SocketModifier Team"
