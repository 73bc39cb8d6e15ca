# -*- coding: utf-8 -*-
"""Find host devices whose bounding box intersects a wall's bounding box.

The intersection test itself is Revit's ``BoundingBoxIntersectsFilter``;
this module only builds the outline and runs one collector per device
category.
"""
from pyrevit import DB

from config_loader import DEFAULT_DEVICE_CATEGORIES


class UnknownCategoryError(ValueError):
    """A configured category name is not a BuiltInCategory member."""


def resolve_categories(names=None):
    """Map BuiltInCategory names (e.g. 'OST_DataDevices') to enum members."""
    if names is None:
        names = DEFAULT_DEVICE_CATEGORIES
    categories = []
    for name in names:
        bic = getattr(DB.BuiltInCategory, name, None)
        if bic is None:
            raise UnknownCategoryError("Unknown device category: {0}".format(name))
        categories.append(bic)
    return categories


def wall_outline(box):
    if box is None:
        return None
    return DB.Outline(box.Min, box.Max)


def find_devices(doc, box, categories):
    """Return FamilyInstances of `categories` intersecting `box`.

    Results are grouped by category, in the given category order.
    A None box matches nothing.
    """
    outline = wall_outline(box)
    if outline is None:
        return []

    devices = []
    for bic in categories:
        bb_filter = DB.BoundingBoxIntersectsFilter(outline)
        collector = (
            DB.FilteredElementCollector(doc)
            .OfClass(DB.FamilyInstance)
            .OfCategory(bic)
            .WherePasses(bb_filter)
        )
        devices.extend(collector)
    return devices


def find_wall_devices(doc, wall, categories):
    """find_devices for a WallRecord."""
    return find_devices(doc, wall.box, categories)
